"""Payment document extraction workflow."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Literal

from paylens.domain.payment import ExtractionResult
from paylens.extraction import extract_payment_fields
from paylens.ocr import OCRLineSource, UnsupportedDocumentError
from paylens.runtime import KeywordRules, get_logger

logger = get_logger(__name__)

PaymentExtractionStatus = Literal[
    "unsupported_document",
    "needs_image",
    "no_text",
    "extracted",
]


@dataclass(frozen=True)
class PaymentExtractionRequest:
    """Inputs for extracting a payment record from an uploaded document."""

    document: Path | bytes
    reference_date: date | None = None
    source: OCRLineSource | None = None
    rules: KeywordRules | None = None


@dataclass(frozen=True)
class PaymentExtractionResult:
    """Outcome from the payment extraction workflow."""

    status: PaymentExtractionStatus
    result: ExtractionResult | None = None
    lines: tuple[str, ...] = ()
    engine: str | None = None
    error: str | None = None


def run_payment_extraction(request: PaymentExtractionRequest) -> PaymentExtractionResult:
    """Run document -> lines -> ExtractionResult.

    An unreadable document still yields a default record (confidence 0) so
    the caller can show an editable form; only unsupported input has none.
    """
    source = request.source or OCRLineSource()
    reference_date = request.reference_date or date.today()

    try:
        acquisition = source.acquire(request.document)
    except UnsupportedDocumentError as exc:
        logger.warning("Rejected payment document: %s", exc)
        return PaymentExtractionResult(status="unsupported_document", error=str(exc))

    result = extract_payment_fields(acquisition.lines, reference_date=reference_date, rules=request.rules)
    if acquisition.status == "needs_image":
        return PaymentExtractionResult(status="needs_image", result=result, error=acquisition.message)
    if not acquisition.lines:
        return PaymentExtractionResult(status="no_text", result=result, error=acquisition.message)

    return PaymentExtractionResult(
        status="extracted",
        result=result,
        lines=tuple(acquisition.lines),
        engine=acquisition.engine,
    )
