"""
API dependencies: wire the configured augmentor into the prompt service.

Tests swap these out with app.dependency_overrides.
"""

from functools import lru_cache

from app.services.augmentor import HttpRetrievalAugmentor, RetrievalAugmentor
from app.services.prompt_service import PromptService


@lru_cache
def get_retrieval_augmentor() -> RetrievalAugmentor:
    return HttpRetrievalAugmentor()


def get_prompt_service() -> PromptService:
    return PromptService(get_retrieval_augmentor())
