"""Schemas exchanged with the retrieval augmentor."""

from typing import Any

from pydantic import BaseModel, Field


class UserMessage(BaseModel):
    """The user's question. text is None when the caller omitted it."""

    text: str | None = Field(None, description="Question text, passed through unvalidated.")


class Metadata(BaseModel):
    """Per-request metadata: correlation id and prior turns (always empty here)."""

    user_message: UserMessage
    chat_memory_id: str = Field(..., description="Fresh correlation id for this request.")
    chat_memory: list[dict[str, Any]] = Field(default_factory=list, description="Prior conversation turns.")


class AugmentationRequest(BaseModel):
    """Request sent to RetrievalAugmentor.augment()."""

    user_message: UserMessage
    metadata: Metadata


class TextSegment(BaseModel):
    text: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)


class Content(BaseModel):
    text_segment: TextSegment


class AugmentationResult(BaseModel):
    """Ordered content items returned by the augmentor."""

    contents: list[Content] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "examples": [{"contents": [{"text_segment": {"text": "Use var x : String", "metadata": {}}}]}]
        }
    }
