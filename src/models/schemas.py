from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class LabelInput(BaseModel):
    description: str = Field(..., min_length=1)
    score: float = Field(..., ge=0.0, le=1.0)


class TextAnalysisRequest(BaseModel):
    text: str = Field(default="", description="Text recognized on the product label")
    labels: List[LabelInput] = Field(default_factory=list)


class ImageAnalysisRequest(BaseModel):
    image_base64: str = Field(..., min_length=1, description="Base64-encoded label photo")
    text: Optional[str] = Field(default=None, description="Label text already recognized on the device")
    labels: Optional[List[LabelInput]] = Field(default=None, description="Image labels already detected")


class ProductAnalysisResponse(BaseModel):
    id: str
    name: str
    manufacturer: str
    production_location: str
    production_date: str
    serial_number: str
    certifications: List[str]
    confidence_score: float
    contains_banned_substances: bool
    banned_substances_found: List[str]
    authenticity_code: str
    authenticity_confidence: float
    verdict: str
    is_valid: bool


class ImageAnalysisResponse(ProductAnalysisResponse):
    recognized_text: str
    labels: List[LabelInput]


class SubstanceResponse(BaseModel):
    name: str
    category: str
    aliases: List[str]


class SubstanceCheckResponse(BaseModel):
    found: bool
    substances: List[str]
    categories: Dict[str, str] = Field(default_factory=dict)
