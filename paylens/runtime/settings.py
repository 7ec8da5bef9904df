"""Environment-driven settings for OCR engines."""

from __future__ import annotations

import os
from dataclasses import dataclass

from paylens.runtime.logging import get_logger

logger = get_logger(__name__)

DEFAULT_OCR_TIMEOUT = 30.0


def _env_str(name: str) -> str | None:
    value = os.environ.get(name, "").strip()
    return value or None


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r, using %.1f", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring non-positive %s=%r, using %.1f", name, raw, default)
        return default
    return value


@dataclass(frozen=True)
class OCRSettings:
    """Credentials, endpoints and timeouts for the configured OCR engines.

    Environment variables:
        GOOGLE_VISION_API_KEY: Google Cloud Vision API key (cloud engine).
        OCR_SPACE_API_KEY: OCR.space API key (cloud engine).
        PAYLENS_PADDLE_OCR_URL: Base URL of a PaddleOCR HTTP service.
        PAYLENS_OCR_TIMEOUT: Per-engine timeout in seconds. Default: 30
        PAYLENS_TESSERACT_CMD: Path to the tesseract binary, if not on PATH.
    """

    google_vision_api_key: str | None = None
    ocr_space_api_key: str | None = None
    paddle_ocr_url: str | None = None
    timeout: float = DEFAULT_OCR_TIMEOUT
    tesseract_cmd: str | None = None

    @classmethod
    def from_env(cls) -> OCRSettings:
        return cls(
            google_vision_api_key=_env_str("GOOGLE_VISION_API_KEY"),
            ocr_space_api_key=_env_str("OCR_SPACE_API_KEY"),
            paddle_ocr_url=_env_str("PAYLENS_PADDLE_OCR_URL"),
            timeout=_env_float("PAYLENS_OCR_TIMEOUT", DEFAULT_OCR_TIMEOUT),
            tesseract_cmd=_env_str("PAYLENS_TESSERACT_CMD"),
        )
