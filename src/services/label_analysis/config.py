"""
Configuration and constants for label analysis.

This module contains environment flags and the policy constants used by the
confidence scoring and field extraction steps.
"""

import os


# Environment variables and feature flags
CLAMP_AUTHENTICITY_CONFIDENCE = os.getenv("CLAMP_AUTHENTICITY_CONFIDENCE", "false").lower() == "true"

# Sentinel the on-device recognizer emits for an image without text
NO_TEXT_SENTINEL = "No text found in image"

# Product name heuristics
PRODUCT_NAME_MAX_LINES = 3
PRODUCT_NAME_MIN_LENGTH = 3
PRODUCT_NAME_MAX_LENGTH = 50

# Completeness weights per populated field
COMPLETENESS_WEIGHTS = {
    "name": 0.1,
    "manufacturer": 0.1,
    "certifications": 0.2,
    "production_date": 0.1,
    "serial_number": 0.2,
    "production_location": 0.1,
    "authenticity_code": 0.2,
}
ITALIAN_ORIGIN_WEIGHT = 0.2

# Classification bands
AUTHENTIC_THRESHOLD = 0.7
COUNTERFEIT_THRESHOLD = 0.3
