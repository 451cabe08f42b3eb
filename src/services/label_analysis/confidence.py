"""
Confidence scoring for analysed labels.

Two independent signals are produced: how Italian the image looks according
to the classifier labels, and how complete the extracted product data is.
"""

from typing import Iterable, Tuple

from constants import ITALIAN_INDICATORS
from services.label_analysis.config import (
    AUTHENTIC_THRESHOLD,
    CLAMP_AUTHENTICITY_CONFIDENCE,
    COMPLETENESS_WEIGHTS,
    COUNTERFEIT_THRESHOLD,
    ITALIAN_ORIGIN_WEIGHT,
)
from services.label_analysis.models import AuthenticityVerdict, ProductRecord


def italian_origin_confidence(labels: Iterable[Tuple[str, float]]) -> float:
    """Mean score of the labels mentioning an Italian indicator, 0.0 if none do."""
    total = 0.0
    count = 0
    for name, score in labels:
        lowered = (name or "").lower()
        if any(indicator in lowered for indicator in ITALIAN_INDICATORS):
            total += score
            count += 1
    return total / count if count else 0.0


def completeness_score(record: ProductRecord) -> float:
    present = {
        "name": bool(record.name.strip()),
        "manufacturer": bool(record.manufacturer.strip()),
        "certifications": bool(record.certifications),
        "production_date": bool(record.production_date.strip()),
        "serial_number": bool(record.serial_number.strip()),
        "production_location": bool(record.production_location.strip()),
        "authenticity_code": bool(record.authenticity_code.strip()),
    }
    return sum(COMPLETENESS_WEIGHTS[field] for field, ok in present.items() if ok)


def authenticity_confidence(record: ProductRecord, clamp: bool = CLAMP_AUTHENTICITY_CONFIDENCE) -> float:
    """
    Score a record by data completeness plus a share of its Italian-origin signal.

    The result is not clamped unless asked to be, so a fully populated record
    with a strong label signal can slightly exceed 1.0.
    """
    score = completeness_score(record) + record.confidence_score * ITALIAN_ORIGIN_WEIGHT
    if clamp:
        return max(0.0, min(1.0, score))
    return score


def classify_confidence(score: float) -> AuthenticityVerdict:
    if score > AUTHENTIC_THRESHOLD:
        return AuthenticityVerdict.AUTHENTIC
    if score < COUNTERFEIT_THRESHOLD:
        return AuthenticityVerdict.COUNTERFEIT
    return AuthenticityVerdict.UNVERIFIED


def determine_verdict(record: ProductRecord) -> AuthenticityVerdict:
    """Banned substances mark a product counterfeit regardless of completeness."""
    if record.contains_banned_substances:
        return AuthenticityVerdict.COUNTERFEIT
    return classify_confidence(authenticity_confidence(record))
