"""Pure image and OCR-output helpers shared by the engine adapters."""

import io
from typing import Any

MAX_IMAGE_DIMENSION = 3000  # Resize if either dimension exceeds this
OCR_IMAGE_PADDING = 50  # White padding around image to prevent edge truncation

MIN_DETECTION_CONFIDENCE = 0.7
MIN_DETECTION_TEXT_LENGTH = 1


def resize_image_bytes(
    image_bytes: bytes, max_dimension: int = MAX_IMAGE_DIMENSION, padding: int = OCR_IMAGE_PADDING
) -> bytes:
    """
    Shrink an image so neither side exceeds max_dimension and pad it with white.

    Payment screenshots are often tall phone captures; the longer side is
    scaled down and the aspect ratio kept. EXIF orientation is applied first
    so every engine sees the image upright.

    Args:
        image_bytes: JPEG/PNG/WebP data
        max_dimension: Maximum allowed dimension (width or height)
        padding: White border added on every side (pixels)

    Returns:
        JPEG bytes ready to upload to an OCR engine
    """
    from PIL import Image, ImageOps

    img = ImageOps.exif_transpose(Image.open(io.BytesIO(image_bytes)))
    width, height = img.size

    if width > max_dimension or height > max_dimension:
        scale = max_dimension / max(width, height)
        img = img.resize((max(1, int(width * scale)), max(1, int(height * scale))), Image.Resampling.LANCZOS)

    if padding > 0:
        img = ImageOps.expand(img.convert("RGB"), border=padding, fill="white")

    buffer = io.BytesIO()
    img.convert("RGB").save(buffer, format="JPEG", quality=95)
    return buffer.getvalue()


def _detection_box(bbox: list[list[float]], padding: int) -> dict[str, float]:
    xs = [p[0] - padding for p in bbox]
    ys = [p[1] - padding for p in bbox]
    return {
        "min_x": min(xs),
        "y_min": min(ys),
        "y_max": max(ys),
        "center_y": sum(ys) / len(ys),
    }


def _overlap_ratio(det: dict[str, Any], line: list[dict[str, Any]]) -> float:
    """Vertical overlap between a detection and a line span, relative to the shorter one."""
    line_min = min(d["y_min"] for d in line)
    line_max = max(d["y_max"] for d in line)
    overlap = min(det["y_max"], line_max) - max(det["y_min"], line_min)
    if overlap <= 0:
        return 0.0
    shorter = min(det["y_max"] - det["y_min"], line_max - line_min)
    return overlap / max(shorter, 1e-6)


def _center_tolerance(detections: list[dict[str, Any]]) -> float:
    heights = sorted(d["y_max"] - d["y_min"] for d in detections if d["y_max"] > d["y_min"])
    if not heights:
        return 24.0
    median_height = heights[len(heights) // 2]
    # Larger text or blur needs a larger tolerance; clamp to avoid cross-row merges.
    return max(12.0, min(30.0, median_height * 0.8))


def group_detections_into_lines(
    detections: list[dict[str, Any]], min_overlap_ratio: float = 0.5
) -> list[list[dict[str, Any]]]:
    """Group positioned detections into reading-order lines (top to bottom, left to right)."""
    if not detections:
        return []
    tolerance = _center_tolerance(detections)
    lines: list[list[dict[str, Any]]] = []
    for det in sorted(detections, key=lambda d: (d["center_y"], d["min_x"])):
        current = lines[-1] if lines else None
        if current is not None:
            line_center = sum(d["center_y"] for d in current) / len(current)
            if (
                _overlap_ratio(det, current) >= min_overlap_ratio
                or abs(det["center_y"] - line_center) <= tolerance
            ):
                current.append(det)
                continue
        lines.append([det])
    return [sorted(line, key=lambda d: d["min_x"]) for line in lines]


def paddle_result_to_lines(raw_result: dict[str, Any], padding: int = OCR_IMAGE_PADDING) -> list[str]:
    """
    Turn a PaddleOCR service response into text lines.

    The service returns ``{"detections": [[bbox, [text, confidence]], ...]}``
    with coordinates on the padded upload. Low-confidence detections are
    dropped before grouping.
    """
    detections: list[dict[str, Any]] = []
    for bbox, (text, confidence) in raw_result.get("detections", []):
        text = str(text).strip()
        if confidence < MIN_DETECTION_CONFIDENCE or len(text) < MIN_DETECTION_TEXT_LENGTH:
            continue
        detections.append({"text": text, **_detection_box(bbox, padding)})

    return [" ".join(det["text"] for det in line) for line in group_detections_into_lines(detections)]
