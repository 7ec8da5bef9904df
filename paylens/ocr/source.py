"""Document -> ordered text lines, via a PDF text layer or a chain of OCR engines."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from paylens.extraction.normalize import clean_lines
from paylens.ocr.engines import OCREngine, OCREngineError, build_default_engines
from paylens.ocr.pdf_text import extract_pdf_text_lines
from paylens.runtime import get_logger

logger = get_logger(__name__)

DocumentType = Literal["jpeg", "png", "webp", "pdf"]
AcquisitionStatus = Literal["text_layer", "ocr", "empty", "needs_image"]

NEEDS_IMAGE_MESSAGE = "Could not read text from this PDF; please re-upload it as an image."


class UnsupportedDocumentError(ValueError):
    """Raised for input that is not a JPEG, PNG, WebP or PDF document."""


def detect_document_type(content: bytes) -> DocumentType:
    """Identify the document from its magic bytes."""
    if content.startswith(b"\xff\xd8\xff"):
        return "jpeg"
    if content.startswith(b"\x89PNG\r\n\x1a\n"):
        return "png"
    if content[:4] == b"RIFF" and content[8:12] == b"WEBP":
        return "webp"
    if content.startswith(b"%PDF"):
        return "pdf"
    raise UnsupportedDocumentError("Unsupported document: expected a JPEG, PNG, WebP or PDF file")


@dataclass(frozen=True)
class AcquisitionResult:
    """Lines read from one document and how they were obtained."""

    lines: list[str] = field(default_factory=list)
    engine: str | None = None
    status: AcquisitionStatus = "empty"
    message: str | None = None


def run_engines(
    engines: Sequence[OCREngine],
    content: bytes,
    *,
    is_pdf: bool = False,
) -> tuple[list[str], str | None]:
    """
    Try engines in order and return the first non-empty result.

    Engine failures are logged and skipped; partial output from different
    engines is never merged. Returns ``([], None)`` when every engine fails.
    """
    for engine in engines:
        if is_pdf and not engine.supports_pdf:
            continue
        try:
            lines = clean_lines(engine.extract_lines(content, is_pdf=is_pdf))
        except OCREngineError as e:
            logger.info("OCR engine %s unavailable: %s", engine.name, e)
            continue
        except Exception:
            logger.exception("OCR engine %s failed unexpectedly", engine.name)
            continue
        if lines:
            logger.info("OCR engine %s returned %d lines", engine.name, len(lines))
            return lines, engine.name
        logger.info("OCR engine %s returned no text", engine.name)
    return [], None


class OCRLineSource:
    """Reads a payment or BOQ document into ordered text lines."""

    def __init__(
        self,
        engines: Sequence[OCREngine] | None = None,
        pdf_text_extractor: Callable[[bytes], list[str]] = extract_pdf_text_lines,
    ) -> None:
        self.engines = list(engines) if engines is not None else build_default_engines()
        self.pdf_text_extractor = pdf_text_extractor

    def acquire(self, document: Path | bytes) -> AcquisitionResult:
        """
        Read the document, reporting which path produced the lines.

        Raises:
            UnsupportedDocumentError: If the input is not an image or PDF.
        """
        content = document.read_bytes() if isinstance(document, Path) else document
        doc_type = detect_document_type(content)

        if doc_type == "pdf":
            text_lines = clean_lines(self.pdf_text_extractor(content))
            if text_lines:
                logger.info("Using PDF text layer (%d lines)", len(text_lines))
                return AcquisitionResult(lines=text_lines, engine="pdf_text", status="text_layer")
            lines, engine = run_engines(self.engines, content, is_pdf=True)
            if lines:
                return AcquisitionResult(lines=lines, engine=engine, status="ocr")
            logger.warning("Scanned PDF could not be read by any engine")
            return AcquisitionResult(status="needs_image", message=NEEDS_IMAGE_MESSAGE)

        lines, engine = run_engines(self.engines, content)
        if lines:
            return AcquisitionResult(lines=lines, engine=engine, status="ocr")
        logger.warning("All OCR engines failed; no text extracted")
        return AcquisitionResult(status="empty", message="No OCR engine returned text.")

    def extract(self, document: Path | bytes) -> list[str]:
        """Return the document's text lines (empty when nothing could be read)."""
        return self.acquire(document).lines
