"""Runtime loader for keyword vocabularies (BOQ brands, description keywords)."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from paylens.runtime.logging import get_logger
from paylens.runtime.paths import get_paths

logger = get_logger(__name__)


@dataclass(frozen=True)
class KeywordRules:
    """Ordered keyword vocabularies used by the extractors and the BOQ parser."""

    brands: tuple[str, ...]
    description_keywords: tuple[str, ...]


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    with open(path, "rb") as f:
        return tomllib.load(f)


def _string_list(config: dict[str, Any], section: str, key: str) -> tuple[str, ...] | None:
    values = config.get(section, {}).get(key)
    if values is None:
        return None
    return tuple(str(v).strip() for v in values if str(v).strip())


@lru_cache(maxsize=4)
def load_keyword_rules(config_path: str | None = None) -> KeywordRules:
    """
    Load keyword rules, layering the project file over the packaged defaults.

    A list present in the project file replaces the default list as a whole;
    lists it omits keep their defaults. File order is preserved because the
    brand list is scanned first-match-wins.

    Args:
        config_path: Optional TOML path override. If None, uses the project
            ``config/keyword_rules.toml`` when it exists.

    Returns:
        KeywordRules with brands and description keywords.
    """
    paths = get_paths()
    defaults = _read_toml(paths.default_keyword_rules)
    brands = _string_list(defaults, "boq", "brands") or ()
    description_keywords = _string_list(defaults, "description", "keywords") or ()

    override_path = Path(config_path) if config_path is not None else paths.keyword_rules
    if override_path.exists():
        overrides = _read_toml(override_path)
        brands = _string_list(overrides, "boq", "brands") or brands
        description_keywords = _string_list(overrides, "description", "keywords") or description_keywords
        logger.debug("Loaded keyword rule overrides from %s", override_path)
    elif config_path is not None:
        logger.warning("Keyword rules file not found: %s", override_path)

    return KeywordRules(brands=brands, description_keywords=description_keywords)
