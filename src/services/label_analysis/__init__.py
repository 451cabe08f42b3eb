"""
Label analysis module.

This module turns the text and classifier labels recognized on a product
label into a product record: banned additive detection, rule-based field
extraction, and the Italian-origin and authenticity confidence scores.
"""

from services.label_analysis.models import (
    AuthenticityVerdict,
    DetectionResult,
    ExtractedFields,
    Label,
    ProductRecord,
    SubstanceEntry,
)
from services.label_analysis.substance_registry import (
    get_substance_registry,
    substance_category,
)
from services.label_analysis.substance_matcher import (
    SubstanceMatcher,
    detect_banned_substances,
    get_substance_matcher,
)
from services.label_analysis.field_extractor import (
    extract_certifications,
    extract_fields,
    extract_manufacturer,
    extract_origin,
    extract_product_name,
    extract_production_date,
    extract_serial_number,
)
from services.label_analysis.confidence import (
    authenticity_confidence,
    classify_confidence,
    completeness_score,
    determine_verdict,
    italian_origin_confidence,
)
from services.label_analysis.assembler import assemble_product_record
from services.label_analysis.text_utils import normalize_for_matching, normalize_recognized_text
from services.label_analysis.config import (
    AUTHENTIC_THRESHOLD,
    CLAMP_AUTHENTICITY_CONFIDENCE,
    COUNTERFEIT_THRESHOLD,
    NO_TEXT_SENTINEL,
)

__all__ = [
    # Data models
    "AuthenticityVerdict",
    "DetectionResult",
    "ExtractedFields",
    "Label",
    "ProductRecord",
    "SubstanceEntry",

    # Registry and matching
    "get_substance_registry",
    "substance_category",
    "SubstanceMatcher",
    "detect_banned_substances",
    "get_substance_matcher",

    # Field extraction
    "extract_certifications",
    "extract_fields",
    "extract_manufacturer",
    "extract_origin",
    "extract_product_name",
    "extract_production_date",
    "extract_serial_number",

    # Scoring
    "authenticity_confidence",
    "classify_confidence",
    "completeness_score",
    "determine_verdict",
    "italian_origin_confidence",

    # Assembly
    "assemble_product_record",

    # Text utilities
    "normalize_for_matching",
    "normalize_recognized_text",

    # Configuration
    "AUTHENTIC_THRESHOLD",
    "CLAMP_AUTHENTICITY_CONFIDENCE",
    "COUNTERFEIT_THRESHOLD",
    "NO_TEXT_SENTINEL",
]
