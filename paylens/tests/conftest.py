"""Shared pytest fixtures for paylens tests."""

from __future__ import annotations

import io
from datetime import date

import pytest

from paylens.runtime import KeywordRules, load_keyword_rules


@pytest.fixture
def reference_date() -> date:
    return date(2024, 8, 20)


@pytest.fixture
def keyword_rules() -> KeywordRules:
    return KeywordRules(brands=("Gurjan", "Century"), description_keywords=("furniture", "plywood"))


@pytest.fixture
def png_bytes() -> bytes:
    from PIL import Image

    buffer = io.BytesIO()
    Image.new("RGB", (40, 20), "white").save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture(autouse=True)
def _fresh_keyword_rules():
    load_keyword_rules.cache_clear()
    yield
    load_keyword_rules.cache_clear()
