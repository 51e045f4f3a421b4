"""
Prompt service: retrieve content support for a question and render the Gosu prompt.

Responsibility: Build the augmentation request, call the injected augmentor,
join the returned text segments and substitute into PROMPT_TEMPLATE.
Called by the API; no HTTP here.
"""

import logging
import uuid

from app.schemas.augmentation import AugmentationRequest, Metadata, UserMessage
from app.services.augmentor import RetrievalAugmentor

logger = logging.getLogger(__name__)

QUESTION_TOKEN = "QUESTION"
CONTENT_SUPPORT_TOKEN = "CONTENT_SUPPORT"
CONTENT_SEPARATOR = "\n\n ---- \n\n"

PROMPT_TEMPLATE = """\
 **You are a Gosu-language expert.** You have in-depth knowledge of the Gosu programming language—its syntax, features, tooling, and ecosystem. Your goal is to help developers of all levels, especially those with Java or scripting backgrounds, to write effective and idiomatic Gosu code.

You should:

* Answer questions from Question Section clearly and accurately, using proper Gosu syntax and terminology.
* Check if the data in the Content Support Section could help to provide an answer.
* Explain Gosu concepts when convinient.
* Include minimal necessary imports or context to make code snippets understandable or runnable.
* Highlight Gosu-specific strengths when comparisons (e.g., with Java) are relevant.
* Use appropriate Gosu file extensions: `.gs`, `.gsx`, `.gsp`, or `.gsi`, based on context.
* Politely redirect or decline questions not related to Gosu or its integrations.

# Question Section

QUESTION

# Content Support Section

CONTENT_SUPPORT
"""


def build_augmentation_request(question: str | None) -> AugmentationRequest:
    """New request per call: fresh correlation id, no prior turns."""
    user_message = UserMessage(text=question)
    metadata = Metadata(
        user_message=user_message,
        chat_memory_id=str(uuid.uuid4()),
        chat_memory=[],
    )
    return AugmentationRequest(user_message=user_message, metadata=metadata)


def render_prompt(question: str | None, content_support: str) -> str:
    """
    Substitute question and content into PROMPT_TEMPLATE.

    Plain str.replace: every occurrence of each token is replaced, including
    tokens introduced by the question itself. A missing question renders as "".
    """
    return PROMPT_TEMPLATE.replace(QUESTION_TOKEN, question or "").replace(
        CONTENT_SUPPORT_TOKEN, content_support
    )


class PromptService:
    """Stateless; one augmentor call per generate()."""

    def __init__(self, augmentor: RetrievalAugmentor) -> None:
        self.augmentor = augmentor

    def content_support(self, question: str | None) -> str:
        """Retrieve supporting segments and join them in the augmentor's order."""
        request = build_augmentation_request(question)
        result = self.augmentor.augment(request)
        texts = [content.text_segment.text for content in result.contents]
        logger.info(
            "[prompt:content_support] chat_memory_id=%s segments=%d",
            request.metadata.chat_memory_id,
            len(texts),
        )
        return CONTENT_SEPARATOR.join(texts)

    def generate(self, question: str | None) -> str:
        logger.info("[prompt:generate] IN  question=%r", question)
        prompt = render_prompt(question, self.content_support(question))
        logger.info("[prompt:generate] OUT prompt_len=%d", len(prompt))
        return prompt
