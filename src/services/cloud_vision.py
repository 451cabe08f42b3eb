import base64
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import httpx

from config import settings
from services.label_analysis.models import Label

logger = logging.getLogger(__name__)

TEXT_DETECTION = "TEXT_DETECTION"
LABEL_DETECTION = "LABEL_DETECTION"


class CloudVisionError(Exception):
    """Raised when the Cloud Vision API cannot be reached or rejects a request."""


@dataclass(frozen=True)
class VisionAnnotations:
    text: str = ""
    labels: List[Label] = field(default_factory=list)


def build_annotate_request(image_b64: str, features: Sequence[str], max_results: int) -> Dict[str, Any]:
    return {
        "requests": [
            {
                "image": {"content": image_b64},
                "features": [{"type": f, "maxResults": max_results} for f in features],
            }
        ]
    }


def _first_response(payload: Dict[str, Any]) -> Dict[str, Any]:
    responses = payload.get("responses") or []
    if not responses:
        return {}
    return responses[0] or {}


def parse_text_annotations(payload: Dict[str, Any]) -> str:
    """Return the full recognized text, or an empty string if there is none."""
    annotations = _first_response(payload).get("textAnnotations") or []
    if not annotations:
        return ""
    return annotations[0].get("description", "")


def parse_label_annotations(payload: Dict[str, Any]) -> List[Label]:
    annotations = _first_response(payload).get("labelAnnotations") or []
    return [
        Label(a.get("description", ""), float(a.get("score", 0.0)))
        for a in annotations
        if a.get("description")
    ]


class CloudVisionService:
    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        max_results: Optional[int] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.cloud_vision_api_key
        self.api_url = api_url or settings.cloud_vision_api_url
        self.max_results = max_results or settings.cloud_vision_max_results
        self.timeout = timeout or settings.cloud_vision_timeout
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def detect_text(self, image_bytes: bytes) -> str:
        payload = await self._annotate(image_bytes, [TEXT_DETECTION])
        return parse_text_annotations(payload)

    async def detect_labels(self, image_bytes: bytes) -> List[Label]:
        payload = await self._annotate(image_bytes, [LABEL_DETECTION])
        return parse_label_annotations(payload)

    async def annotate(self, image_bytes: bytes) -> VisionAnnotations:
        """Request text and labels together so both inputs arrive as one result."""
        payload = await self._annotate(image_bytes, [TEXT_DETECTION, LABEL_DETECTION])
        return VisionAnnotations(
            text=parse_text_annotations(payload),
            labels=parse_label_annotations(payload),
        )

    async def _annotate(self, image_bytes: bytes, features: Sequence[str]) -> Dict[str, Any]:
        if not self.api_key:
            raise CloudVisionError("Cloud Vision API key is not configured")
        if not image_bytes:
            raise CloudVisionError("Cannot read image")

        image_b64 = base64.b64encode(image_bytes).decode("ascii")
        request = build_annotate_request(image_b64, features, self.max_results)
        timeout = httpx.Timeout(self.timeout)

        async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
            try:
                response = await client.post(self.api_url, params={"key": self.api_key}, json=request)
                response.raise_for_status()
                return response.json()
            except httpx.HTTPStatusError as e:
                logger.error(f"Cloud Vision request failed: {e.response.status_code}")
                raise CloudVisionError(
                    f"Request failed: {e.response.status_code} - {e.response.reason_phrase}"
                ) from e
            except httpx.HTTPError as e:
                logger.error(f"Cloud Vision API error: {e}")
                raise CloudVisionError(str(e)) from e
            except ValueError as e:
                logger.error(f"Cloud Vision returned invalid JSON: {e}")
                raise CloudVisionError("Invalid response body") from e
