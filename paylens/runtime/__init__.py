"""Runtime infrastructure for paylens.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Path resolution via get_paths(), ProjectPaths
- Keyword vocabularies via load_keyword_rules()
- OCR engine settings via OCRSettings.from_env()

Usage:
    from paylens.runtime import get_logger, load_keyword_rules

    logger = get_logger(__name__)
    rules = load_keyword_rules()
"""

from paylens.runtime.keyword_rules import KeywordRules, load_keyword_rules
from paylens.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    parse_log_level,
    set_log_level,
)
from paylens.runtime.paths import ProjectPaths, get_paths, reset_paths
from paylens.runtime.settings import DEFAULT_OCR_TIMEOUT, OCRSettings

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "parse_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Rules
    "KeywordRules",
    "load_keyword_rules",
    # Paths
    "get_paths",
    "reset_paths",
    "ProjectPaths",
    # Settings
    "OCRSettings",
    "DEFAULT_OCR_TIMEOUT",
]
