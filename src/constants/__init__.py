from constants.banned_substances import (
    BANNED_SUBSTANCES,
    COLORANTS,
    OTHER_ADDITIVES,
    PRESERVATIVES,
    SUBSTANCE_CATEGORIES,
)
from constants.text_patterns import (
    CERTIFICATION_PATTERNS,
    COMPILED_CERTIFICATION_PATTERNS,
    E_CODE_ALIAS_PATTERN,
    E_CODE_PATTERN,
    ITALIAN_INDICATORS,
    MADE_IN_ITALY_PATTERN,
    MANUFACTURER_PATTERNS,
    ORIGIN_COUNTRY,
    PRODUCTION_DATE_PATTERN,
    SERIAL_NUMBER_PATTERN,
)

__all__ = [
    "BANNED_SUBSTANCES",
    "PRESERVATIVES",
    "COLORANTS",
    "OTHER_ADDITIVES",
    "SUBSTANCE_CATEGORIES",
    "CERTIFICATION_PATTERNS",
    "COMPILED_CERTIFICATION_PATTERNS",
    "E_CODE_PATTERN",
    "E_CODE_ALIAS_PATTERN",
    "ITALIAN_INDICATORS",
    "MADE_IN_ITALY_PATTERN",
    "MANUFACTURER_PATTERNS",
    "ORIGIN_COUNTRY",
    "PRODUCTION_DATE_PATTERN",
    "SERIAL_NUMBER_PATTERN",
]
