"""Tests for OCR image and detection helpers."""

from __future__ import annotations

import io

from paylens.ocr.ocr_helpers import paddle_result_to_lines, resize_image_bytes


def _bbox(x0: int, y0: int, x1: int, y1: int) -> list[list[int]]:
    return [[x0, y0], [x1, y0], [x1, y1], [x0, y1]]


def test_paddle_detections_group_into_reading_order_lines() -> None:
    raw_result = {
        "detections": [
            [_bbox(60, 200, 300, 230), ["12/08/2024", 0.9]],
            [_bbox(400, 62, 600, 92), ["Paid", 0.95]],
            [_bbox(60, 60, 200, 90), ["₹672", 0.98]],
            [_bbox(60, 300, 200, 330), ["noise", 0.3]],
        ]
    }

    assert paddle_result_to_lines(raw_result) == ["₹672 Paid", "12/08/2024"]


def test_paddle_result_without_detections_is_empty() -> None:
    assert paddle_result_to_lines({"detections": []}) == []


def test_resize_image_bytes_bounds_and_pads(png_bytes) -> None:
    from PIL import Image

    from paylens.ocr.ocr_helpers import OCR_IMAGE_PADDING

    big = io.BytesIO()
    Image.new("RGB", (4000, 1000), "white").save(big, format="PNG")

    resized = Image.open(io.BytesIO(resize_image_bytes(big.getvalue(), max_dimension=2000)))
    assert resized.format == "JPEG"
    assert resized.size == (2000 + 2 * OCR_IMAGE_PADDING, 500 + 2 * OCR_IMAGE_PADDING)

    small = Image.open(io.BytesIO(resize_image_bytes(png_bytes, padding=0)))
    assert small.size == (40, 20)
