"""BOQ document reconciliation workflow."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from paylens.boq import MatchConfig, parse_boq_rows, reconcile_boq_items
from paylens.domain.boq import BOQLineItem, Product, ReconciliationResult
from paylens.ocr import OCRLineSource, UnsupportedDocumentError
from paylens.runtime import get_logger

logger = get_logger(__name__)

BOQReconciliationStatus = Literal[
    "unsupported_document",
    "needs_image",
    "no_text",
    "no_items",
    "reconciled",
]


@dataclass(frozen=True)
class BOQReconciliationRequest:
    """Inputs for reconciling a BOQ document against the product catalog."""

    document: Path | bytes
    catalog: Sequence[Product]
    source: OCRLineSource | None = None
    config: MatchConfig | None = None
    max_workers: int | None = None


@dataclass(frozen=True)
class BOQReconciliationResult:
    """Outcome from the BOQ reconciliation workflow."""

    status: BOQReconciliationStatus
    items: list[BOQLineItem] = field(default_factory=list)
    reconciliation: ReconciliationResult | None = None
    error: str | None = None


def run_boq_reconciliation(request: BOQReconciliationRequest) -> BOQReconciliationResult:
    """Run document -> lines -> BOQ rows -> auto-matched / unmatched."""
    source = request.source or OCRLineSource()
    try:
        acquisition = source.acquire(request.document)
    except UnsupportedDocumentError as exc:
        logger.warning("Rejected BOQ document: %s", exc)
        return BOQReconciliationResult(status="unsupported_document", error=str(exc))

    if acquisition.status == "needs_image":
        return BOQReconciliationResult(status="needs_image", error=acquisition.message)
    if not acquisition.lines:
        return BOQReconciliationResult(status="no_text", error=acquisition.message)

    items = parse_boq_rows(acquisition.lines)
    if not items:
        logger.info("No BOQ rows recognised in %d lines", len(acquisition.lines))
        return BOQReconciliationResult(status="no_items", error="No BOQ rows found in the document.")

    reconciliation = reconcile_boq_items(
        items, request.catalog, config=request.config, max_workers=request.max_workers
    )
    return BOQReconciliationResult(status="reconciled", items=items, reconciliation=reconciliation)
