"""
Assembly of a complete product record from recognized text and labels.
"""

import hashlib
import json
import logging
from typing import List, Optional, Sequence, Tuple

from services.label_analysis.confidence import italian_origin_confidence
from services.label_analysis.field_extractor import extract_fields
from services.label_analysis.models import Label, ProductRecord
from services.label_analysis.substance_matcher import detect_banned_substances
from services.label_analysis.text_utils import normalize_recognized_text

logger = logging.getLogger(__name__)


def assemble_product_record(
    text: Optional[str],
    labels: Sequence[Tuple[str, float]] = (),
    record_id: Optional[str] = None,
) -> ProductRecord:
    """
    Analyse recognized label text and classifier labels.

    Args:
        text: Text recognized on the label, possibly empty or the no-text sentinel
        labels: (description, score) pairs from an image classifier
        record_id: Identifier to use instead of the input digest

    Returns:
        Immutable product record; identical inputs give equal records
    """
    normalized = normalize_recognized_text(text)
    label_list = _coerce_labels(labels)

    detection = detect_banned_substances(normalized)
    fields = extract_fields(normalized, label_list)

    record = ProductRecord(
        id=record_id or _record_id(normalized, label_list),
        name=fields.name,
        manufacturer=fields.manufacturer,
        production_location=fields.production_location,
        production_date=fields.production_date,
        serial_number=fields.serial_number,
        certifications=fields.certifications,
        confidence_score=italian_origin_confidence(label_list),
        contains_banned_substances=detection.found,
        banned_substances_found=detection.substances,
    )
    logger.debug(
        f"Assembled record {record.id}: name={record.name!r} "
        f"certifications={list(record.certifications)} banned={list(record.banned_substances_found)}"
    )
    return record


def _coerce_labels(labels: Sequence[Tuple[str, float]]) -> List[Label]:
    return [Label(str(name), float(score)) for name, score in labels or ()]


def _record_id(text: str, labels: List[Label]) -> str:
    payload = json.dumps({"text": text, "labels": [list(label) for label in labels]}, ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]
