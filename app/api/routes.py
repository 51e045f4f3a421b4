"""
API route aggregator: register endpoints; no logic — only delegate to services.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.api.deps import get_prompt_service
from app.services.prompt_service import PromptService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "/generate",
    response_class=PlainTextResponse,
    tags=["prompt"],
    summary="Render the Gosu prompt for a question",
    description="Retrieve content support for the question and return the filled prompt template as text/plain. Retriever failures surface as 500.",
)
def generate(
    prompt: str | None = None,
    service: PromptService = Depends(get_prompt_service),
) -> PlainTextResponse:
    logger.info("[api:generate] IN  prompt=%r", prompt)
    return PlainTextResponse(service.generate(prompt))
