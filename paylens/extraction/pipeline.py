"""Payment-document extraction: raw lines -> candidates -> ExtractionResult."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from paylens.domain.payment import ExtractionResult, FieldCandidate, RawLine
from paylens.extraction.extractors import (
    AmountExtractor,
    CandidateExtractor,
    DateExtractor,
    DescriptionExtractor,
    PlatformDetector,
    TransactionIdExtractor,
    VendorExtractor,
)
from paylens.extraction.selector import build_result
from paylens.runtime import KeywordRules, get_logger, load_keyword_rules

logger = get_logger(__name__)


def to_raw_lines(lines: Sequence[str | RawLine], engine: str | None = None) -> list[RawLine]:
    """Wrap OCR strings as positioned RawLines, dropping blank ones."""
    out: list[RawLine] = []
    for item in lines:
        if isinstance(item, RawLine):
            text, tag = item.text, item.engine
        else:
            text, tag = item, engine
        text = text.strip()
        if text:
            out.append(RawLine(text=text, position=len(out), engine=tag))
    return out


def build_extractors(reference_date: date, rules: KeywordRules) -> list[CandidateExtractor]:
    return [
        AmountExtractor(),
        VendorExtractor(),
        DateExtractor(reference_date),
        DescriptionExtractor(rules.description_keywords),
        PlatformDetector(),
        TransactionIdExtractor(),
    ]


def collect_candidates(
    lines: Sequence[RawLine],
    extractors: Sequence[CandidateExtractor],
) -> list[FieldCandidate]:
    """Run every extractor; a failing extractor contributes no candidates."""
    candidates: list[FieldCandidate] = []
    for extractor in extractors:
        try:
            candidates.extend(extractor.scan(lines))
        except Exception:
            logger.exception("%s failed; continuing without its candidates", type(extractor).__name__)
    return candidates


def extract_payment_fields(
    lines: Sequence[str | RawLine],
    *,
    reference_date: date | None = None,
    rules: KeywordRules | None = None,
    engine: str | None = None,
) -> ExtractionResult:
    """
    Extract a structured payment record from OCR lines.

    Args:
        lines: OCR output in document order (strings or RawLines).
        reference_date: Date used as the date default and for "today"/"yesterday".
            Defaults to today.
        rules: Keyword vocabularies; defaults to load_keyword_rules().
        engine: Tag recorded on plain-string lines.

    Returns:
        ExtractionResult; fields nobody proposed keep their defaults.
    """
    reference_date = reference_date or date.today()
    raw_lines = to_raw_lines(lines, engine=engine)
    if not raw_lines:
        logger.info("No OCR lines; returning empty extraction result")
        return ExtractionResult.empty(reference_date)

    rules = rules or load_keyword_rules()
    candidates = collect_candidates(raw_lines, build_extractors(reference_date, rules))
    result = build_result(candidates, reference_date)
    logger.info(
        "Extracted amount=%s vendor=%r date=%s platform=%s confidence=%d from %d lines",
        result.amount,
        result.vendor,
        result.date.isoformat(),
        result.platform.value,
        result.confidence,
        len(raw_lines),
    )
    return result
