"""
Retrieval augmentor: the external collaborator that returns supporting passages.

Responsibility: Define the augment(request) -> result capability and provide an
HTTP-backed implementation that calls a remote retrieval service. Retrieval,
ranking and embeddings all happen on the remote side.
"""

import logging
from typing import Any, Protocol

import httpx

from app.core.config import RETRIEVER_API_KEY, RETRIEVER_API_TIMEOUT, RETRIEVER_URL
from app.core.errors import ServiceUnavailableError
from app.schemas.augmentation import AugmentationRequest, AugmentationResult, Content, TextSegment

logger = logging.getLogger(__name__)


class RetrievalAugmentor(Protocol):
    """Anything that can turn an AugmentationRequest into retrieved content."""

    def augment(self, request: AugmentationRequest) -> AugmentationResult:
        ...


def _to_content(item: Any) -> Content:
    """Accept {"text": ...} or {"text_segment": {"text": ...}} items; bare strings too."""
    if isinstance(item, str):
        return Content(text_segment=TextSegment(text=item))
    if isinstance(item, dict):
        segment = item.get("text_segment")
        if isinstance(segment, dict):
            return Content(text_segment=TextSegment.model_validate(segment))
        text = item.get("text")
        if isinstance(text, str):
            return Content(text_segment=TextSegment(text=text, metadata=item.get("metadata") or {}))
    raise ValueError(f"Unsupported content item from retriever: {item!r}")


def parse_augmentation_result(data: Any) -> AugmentationResult:
    """Build an AugmentationResult from the retriever's JSON body."""
    if isinstance(data, list):
        items = data
    elif isinstance(data, dict):
        items = data.get("contents", [])
    else:
        raise ValueError(f"Unexpected retriever response: {type(data).__name__}")
    if not isinstance(items, list):
        raise ValueError(f"Retriever 'contents' must be a list, got {type(items).__name__}")
    return AugmentationResult(contents=[_to_content(item) for item in items])


class HttpRetrievalAugmentor:
    """
    POST the augmentation request as JSON to a retrieval service and parse
    the returned contents. Errors (connection, non-2xx) propagate to the caller.
    """

    def __init__(
        self,
        url: str = RETRIEVER_URL,
        api_key: str = RETRIEVER_API_KEY,
        timeout: float = RETRIEVER_API_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.url = url
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def augment(self, request: AugmentationRequest) -> AugmentationResult:
        if not self.url:
            raise ServiceUnavailableError("RETRIEVER_URL must be set in .env to retrieve content support")

        logger.info("[augmentor:augment] IN  chat_memory_id=%s", request.metadata.chat_memory_id)
        payload = request.model_dump(mode="json")
        with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
            response = client.post(self.url, json=payload, headers=self._headers())
        response.raise_for_status()

        result = parse_augmentation_result(response.json())
        logger.info("[augmentor:augment] OUT contents=%d", len(result.contents))
        return result
