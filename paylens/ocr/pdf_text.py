"""Embedded text layer extraction for PDFs."""

from __future__ import annotations

import io

import pdfplumber

from paylens.runtime import get_logger

logger = get_logger(__name__)


def extract_pdf_text_lines(content: bytes) -> list[str]:
    """
    Return the PDF's text layer as trimmed non-empty lines, page by page.

    Scanned PDFs have no text layer and yield an empty list. A PDF that
    pdfplumber cannot open also yields an empty list so the caller can fall
    back to OCR.
    """
    lines: list[str] = []
    try:
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            for page in pdf.pages:
                text = page.extract_text() or ""
                lines.extend(line.strip() for line in text.splitlines() if line.strip())
    except Exception as e:
        # pdfminer raises a wide range of parser errors for damaged files.
        logger.warning("Could not read PDF text layer: %s", e)
        return []
    logger.debug("PDF text layer yielded %d lines", len(lines))
    return lines
