from .cloud_vision import CloudVisionError, CloudVisionService, VisionAnnotations
from .label_analysis import assemble_product_record, detect_banned_substances, determine_verdict

__all__ = [
    "CloudVisionError",
    "CloudVisionService",
    "VisionAnnotations",
    "assemble_product_record",
    "detect_banned_substances",
    "determine_verdict",
]
