"""OCR engine adapters.

Each engine turns one document (image or PDF bytes) into text lines or raises
OCREngineError. Engines hold configuration only; the optional httpx.Client is
injected so callers control connection reuse and tests can mock transport.
"""

from __future__ import annotations

import base64
import io
import time
from typing import Any, Protocol

import httpx

from paylens.ocr.ocr_helpers import paddle_result_to_lines, resize_image_bytes
from paylens.runtime import DEFAULT_OCR_TIMEOUT, OCRSettings, get_logger

logger = get_logger(__name__)

GOOGLE_VISION_URL = "https://vision.googleapis.com/v1/images:annotate"
OCR_SPACE_URL = "https://api.ocr.space/parse/image"


class OCREngineError(RuntimeError):
    """Raised when an engine cannot produce text (credentials, network, timeout, empty output)."""


class OCREngine(Protocol):
    name: str
    supports_pdf: bool

    def extract_lines(self, content: bytes, *, is_pdf: bool = False) -> list[str]: ...


def split_lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


class _HTTPEngine:
    """Shared request plumbing for engines that talk to an HTTP service."""

    name = "http"
    supports_pdf = False

    def __init__(self, timeout: float = DEFAULT_OCR_TIMEOUT, client: httpx.Client | None = None) -> None:
        self.timeout = timeout
        self.client = client

    def _post(self, url: str, **kwargs: Any) -> dict[str, Any]:
        start_time = time.time()
        try:
            if self.client is not None:
                response = self.client.post(url, timeout=self.timeout, **kwargs)
            else:
                response = httpx.post(url, timeout=self.timeout, **kwargs)
        except httpx.TimeoutException as e:
            raise OCREngineError(f"{self.name} timed out after {self.timeout:.0f}s") from e
        except httpx.RequestError as e:
            raise OCREngineError(f"Failed to connect to {self.name}: {e}") from e
        logger.debug("%s returned HTTP %s in %.2f seconds", self.name, response.status_code, time.time() - start_time)

        if response.status_code != 200:
            raise OCREngineError(f"{self.name} error: HTTP {response.status_code}")
        try:
            payload = response.json()
        except ValueError as e:
            raise OCREngineError(f"{self.name} returned malformed JSON") from e
        if not isinstance(payload, dict):
            raise OCREngineError(f"{self.name} returned an unexpected payload")
        return payload


class GoogleVisionEngine(_HTTPEngine):
    name = "google_vision"

    def __init__(
        self, api_key: str | None, timeout: float = DEFAULT_OCR_TIMEOUT, client: httpx.Client | None = None
    ) -> None:
        super().__init__(timeout, client)
        self.api_key = api_key

    def extract_lines(self, content: bytes, *, is_pdf: bool = False) -> list[str]:
        if not self.api_key:
            raise OCREngineError("Google Vision API key not configured")
        if is_pdf:
            raise OCREngineError("Google Vision images:annotate does not accept PDFs")
        body = {
            "requests": [
                {
                    "image": {"content": base64.b64encode(resize_image_bytes(content)).decode("ascii")},
                    "features": [{"type": "TEXT_DETECTION", "maxResults": 1}],
                }
            ]
        }
        payload = self._post(GOOGLE_VISION_URL, params={"key": self.api_key}, json=body)
        try:
            response = payload["responses"][0]
        except (KeyError, IndexError, TypeError) as e:
            raise OCREngineError("Google Vision response has no results") from e
        if "error" in response:
            raise OCREngineError(f"Google Vision error: {response['error'].get('message', 'unknown')}")
        annotations = response.get("textAnnotations") or []
        if not annotations:
            raise OCREngineError("No text detected by Google Vision")
        return split_lines(annotations[0].get("description", ""))


class OCRSpaceEngine(_HTTPEngine):
    name = "ocr_space"
    supports_pdf = True

    def __init__(
        self, api_key: str | None, timeout: float = DEFAULT_OCR_TIMEOUT, client: httpx.Client | None = None
    ) -> None:
        super().__init__(timeout, client)
        self.api_key = api_key

    def extract_lines(self, content: bytes, *, is_pdf: bool = False) -> list[str]:
        if not self.api_key:
            raise OCREngineError("OCR.space API key not configured")
        if is_pdf:
            upload = ("document.pdf", content, "application/pdf")
        else:
            upload = ("document.jpg", resize_image_bytes(content), "image/jpeg")
        data = {
            "apikey": self.api_key,
            "language": "eng",
            "isOverlayRequired": "false",
            "detectOrientation": "true",
            "isTable": "true",
            "OCREngine": "2",
        }
        payload = self._post(OCR_SPACE_URL, data=data, files={"file": upload})
        if payload.get("IsErroredOnProcessing"):
            message = payload.get("ErrorMessage") or "unknown error"
            if isinstance(message, list):
                message = "; ".join(str(m) for m in message)
            raise OCREngineError(f"OCR.space error: {message}")
        lines: list[str] = []
        for parsed in payload.get("ParsedResults") or []:
            lines.extend(split_lines(parsed.get("ParsedText", "")))
        if not lines:
            raise OCREngineError("No text detected by OCR.space")
        return lines


class PaddleServiceEngine(_HTTPEngine):
    """Self-hosted PaddleOCR service exposing ``POST {url}/ocr``."""

    name = "paddle_service"

    def __init__(
        self, base_url: str | None, timeout: float = DEFAULT_OCR_TIMEOUT, client: httpx.Client | None = None
    ) -> None:
        super().__init__(timeout, client)
        self.base_url = base_url.rstrip("/") if base_url else None

    def extract_lines(self, content: bytes, *, is_pdf: bool = False) -> list[str]:
        if not self.base_url:
            raise OCREngineError("PaddleOCR service URL not configured")
        if is_pdf:
            raise OCREngineError("PaddleOCR service accepts images only")
        resized = resize_image_bytes(content)
        payload = self._post(f"{self.base_url}/ocr", files={"file": ("document.jpg", resized, "image/jpeg")})
        try:
            lines = paddle_result_to_lines(payload)
        except (TypeError, ValueError) as e:
            raise OCREngineError("PaddleOCR service returned malformed detections") from e
        if not lines:
            raise OCREngineError("No text detected by PaddleOCR service")
        return lines


class TesseractEngine:
    """Offline engine backed by a local tesseract binary.

    pytesseract keeps the binary path in a module global, so ``tesseract_cmd``
    is applied once here and affects every engine in the process.
    """

    name = "tesseract"
    supports_pdf = False

    def __init__(
        self, tesseract_cmd: str | None = None, timeout: float = DEFAULT_OCR_TIMEOUT, config: str = "--psm 6"
    ) -> None:
        self.tesseract_cmd = tesseract_cmd
        self.timeout = timeout
        self.config = config
        if tesseract_cmd:
            import pytesseract

            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def extract_lines(self, content: bytes, *, is_pdf: bool = False) -> list[str]:
        if is_pdf:
            raise OCREngineError("Tesseract engine accepts images only")
        import pytesseract
        from PIL import Image
        try:
            with Image.open(io.BytesIO(content)) as img:
                text = pytesseract.image_to_string(img.convert("RGB"), config=self.config, timeout=self.timeout)
        except pytesseract.TesseractNotFoundError as e:
            raise OCREngineError("tesseract binary not found") from e
        except RuntimeError as e:
            # pytesseract signals its timeout with a bare RuntimeError.
            raise OCREngineError(f"Tesseract failed: {e}") from e
        except OSError as e:
            raise OCREngineError(f"Tesseract could not read the image: {e}") from e
        lines = split_lines(text or "")
        if not lines:
            raise OCREngineError("No text detected by Tesseract")
        return lines


def build_default_engines(settings: OCRSettings | None = None, client: httpx.Client | None = None) -> list[OCREngine]:
    """Engines in priority order: cloud first, local last."""
    settings = settings or OCRSettings.from_env()
    return [
        GoogleVisionEngine(settings.google_vision_api_key, settings.timeout, client),
        OCRSpaceEngine(settings.ocr_space_api_key, settings.timeout, client),
        PaddleServiceEngine(settings.paddle_ocr_url, settings.timeout, client),
        TesseractEngine(settings.tesseract_cmd, settings.timeout),
    ]
