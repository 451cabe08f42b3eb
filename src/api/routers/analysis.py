"""API router for product label analysis."""

import base64
import binascii
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from models.schemas import (
    ImageAnalysisRequest,
    ImageAnalysisResponse,
    LabelInput,
    ProductAnalysisResponse,
    TextAnalysisRequest,
)
from services.cloud_vision import CloudVisionError, CloudVisionService, VisionAnnotations
from services.label_analysis import (
    Label,
    ProductRecord,
    assemble_product_record,
    authenticity_confidence,
    determine_verdict,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_cloud_vision_service() -> CloudVisionService:
    return CloudVisionService()


async def _recognize(
    vision: CloudVisionService, image_bytes: bytes, request: ImageAnalysisRequest
) -> VisionAnnotations:
    """Ask Cloud Vision only for the inputs the caller did not supply."""
    labels = None
    if request.labels is not None:
        labels = [Label(label.description, label.score) for label in request.labels]

    if request.text is None and labels is None:
        return await vision.annotate(image_bytes)
    if request.text is None:
        return VisionAnnotations(text=await vision.detect_text(image_bytes), labels=labels)
    if labels is None:
        return VisionAnnotations(text=request.text, labels=await vision.detect_labels(image_bytes))
    return VisionAnnotations(text=request.text, labels=labels)


def _analysis_payload(record: ProductRecord) -> Dict[str, Any]:
    return {
        "id": record.id,
        "name": record.name,
        "manufacturer": record.manufacturer,
        "production_location": record.production_location,
        "production_date": record.production_date,
        "serial_number": record.serial_number,
        "certifications": list(record.certifications),
        "confidence_score": record.confidence_score,
        "contains_banned_substances": record.contains_banned_substances,
        "banned_substances_found": list(record.banned_substances_found),
        "authenticity_code": record.authenticity_code,
        "authenticity_confidence": authenticity_confidence(record),
        "verdict": determine_verdict(record).value,
        "is_valid": record.is_valid(),
    }


@router.post("/text", response_model=ProductAnalysisResponse)
async def analyze_text(request: TextAnalysisRequest) -> ProductAnalysisResponse:
    """
    Analyse text and labels already recognized on a product label.

    Args:
        request: Recognized text and classifier labels

    Returns:
        Extracted product record with confidence scores and verdict
    """
    labels = [(label.description, label.score) for label in request.labels]
    record = assemble_product_record(request.text, labels)
    return ProductAnalysisResponse(**_analysis_payload(record))


@router.post("/image", response_model=ImageAnalysisResponse)
async def analyze_image(
    request: ImageAnalysisRequest,
    vision: CloudVisionService = Depends(get_cloud_vision_service),
) -> ImageAnalysisResponse:
    """
    Recognize a label photo with Cloud Vision and analyse the result.

    Args:
        request: Base64-encoded image, optionally with text or labels the
            caller already has so Cloud Vision is only asked for the rest
        vision: Cloud Vision client

    Returns:
        Product record plus the recognized text and labels

    Raises:
        HTTPException: If the image is not valid base64, Cloud Vision is not
            configured, or the Cloud Vision request fails
    """
    if not vision.is_configured:
        raise HTTPException(status_code=503, detail="Cloud Vision API key is not configured")

    try:
        image_bytes = base64.b64decode(request.image_base64, validate=True)
    except (binascii.Error, ValueError):
        raise HTTPException(status_code=400, detail="image_base64 is not valid base64")

    try:
        annotations = await _recognize(vision, image_bytes, request)
    except CloudVisionError as e:
        logger.error(f"Image analysis failed: {e}")
        raise HTTPException(status_code=502, detail=f"Cloud Vision request failed: {e}")

    record = assemble_product_record(annotations.text, annotations.labels)
    return ImageAnalysisResponse(
        **_analysis_payload(record),
        recognized_text=annotations.text,
        labels=[LabelInput(description=label.name, score=label.score) for label in annotations.labels],
    )
