"""
Pattern-based extraction of product fields from recognized label text.

Every extractor is independent and returns an empty value when nothing
matches; a label without a serial number or a certification is a normal
outcome, not an error.
"""

from typing import Iterable, List, Sequence, Tuple

from constants import (
    COMPILED_CERTIFICATION_PATTERNS,
    MADE_IN_ITALY_PATTERN,
    MANUFACTURER_PATTERNS,
    ORIGIN_COUNTRY,
    PRODUCTION_DATE_PATTERN,
    SERIAL_NUMBER_PATTERN,
)
from services.label_analysis.config import (
    PRODUCT_NAME_MAX_LENGTH,
    PRODUCT_NAME_MAX_LINES,
    PRODUCT_NAME_MIN_LENGTH,
)
from services.label_analysis.models import ExtractedFields


def extract_certifications(text: str) -> Tuple[str, ...]:
    """Return certification codes found in text, in DOP, IGP, DOCG, DOC, STG, BIO order."""
    if not text:
        return ()
    return tuple(
        code for code, pattern in COMPILED_CERTIFICATION_PATTERNS.items()
        if pattern.search(text)
    )


def extract_serial_number(text: str) -> str:
    match = SERIAL_NUMBER_PATTERN.search(text or "")
    return match.group(1) if match else ""


def extract_production_date(text: str) -> str:
    match = PRODUCTION_DATE_PATTERN.search(text or "")
    return match.group(1) if match else ""


def extract_origin(text: str) -> str:
    """Return "Italy" when the label carries a made-in-Italy statement."""
    if text and MADE_IN_ITALY_PATTERN.search(text):
        return ORIGIN_COUNTRY
    return ""


def extract_product_name(text: str, labels: Sequence[Tuple[str, float]] = ()) -> str:
    """
    Guess the product name from the top of the label.

    The first lines of a label usually carry the product name, so the first
    of the opening lines with a plausible length wins. Without one, the most
    confident image label is used instead.
    """
    candidates = _opening_lines(text)
    if candidates:
        return candidates[0]
    return _best_label_name(labels)


def _opening_lines(text: str) -> List[str]:
    if not text:
        return []
    lines = [line.strip() for line in text.split("\n")[:PRODUCT_NAME_MAX_LINES]]
    return [line for line in lines if PRODUCT_NAME_MIN_LENGTH <= len(line) <= PRODUCT_NAME_MAX_LENGTH]


def _best_label_name(labels: Iterable[Tuple[str, float]]) -> str:
    best_name, best_score = "", None
    for name, score in labels:
        if best_score is None or score > best_score:
            best_name, best_score = name, score
    return best_name.strip() if best_name else ""


def extract_manufacturer(text: str) -> str:
    if not text:
        return ""
    for pattern in MANUFACTURER_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1).strip()
    return ""


def extract_fields(text: str, labels: Sequence[Tuple[str, float]] = ()) -> ExtractedFields:
    """Run every extractor over the same text."""
    return ExtractedFields(
        name=extract_product_name(text, labels),
        manufacturer=extract_manufacturer(text),
        production_location=extract_origin(text),
        production_date=extract_production_date(text),
        serial_number=extract_serial_number(text),
        certifications=extract_certifications(text),
    )

