from models.schemas import (
    ImageAnalysisRequest,
    ImageAnalysisResponse,
    LabelInput,
    ProductAnalysisResponse,
    SubstanceCheckResponse,
    SubstanceResponse,
    TextAnalysisRequest,
)

__all__ = [
    "ImageAnalysisRequest",
    "ImageAnalysisResponse",
    "LabelInput",
    "ProductAnalysisResponse",
    "SubstanceCheckResponse",
    "SubstanceResponse",
    "TextAnalysisRequest",
]
