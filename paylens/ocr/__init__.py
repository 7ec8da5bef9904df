"""Document text acquisition: PDF text layer and OCR engine fallback chain."""

from paylens.ocr.engines import (
    GoogleVisionEngine,
    OCREngine,
    OCREngineError,
    OCRSpaceEngine,
    PaddleServiceEngine,
    TesseractEngine,
    build_default_engines,
)
from paylens.ocr.source import (
    NEEDS_IMAGE_MESSAGE,
    AcquisitionResult,
    OCRLineSource,
    UnsupportedDocumentError,
    detect_document_type,
    run_engines,
)

__all__ = [
    "GoogleVisionEngine",
    "OCREngine",
    "OCREngineError",
    "OCRSpaceEngine",
    "PaddleServiceEngine",
    "TesseractEngine",
    "build_default_engines",
    "NEEDS_IMAGE_MESSAGE",
    "AcquisitionResult",
    "OCRLineSource",
    "UnsupportedDocumentError",
    "detect_document_type",
    "run_engines",
]
