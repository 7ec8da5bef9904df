"""paylens: payment and BOQ data extraction from OCR text."""

__version__ = "0.1.0"
