"""Application workflows for paylens."""

from paylens.application.boq import BOQReconciliationRequest, BOQReconciliationResult, run_boq_reconciliation
from paylens.application.payments import (
    PaymentExtractionRequest,
    PaymentExtractionResult,
    run_payment_extraction,
)

__all__ = [
    "BOQReconciliationRequest",
    "BOQReconciliationResult",
    "run_boq_reconciliation",
    "PaymentExtractionRequest",
    "PaymentExtractionResult",
    "run_payment_extraction",
]
