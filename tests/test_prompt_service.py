"""
Unit tests for the prompt service: request building, joining, substitution.
"""

import pytest

from app.schemas.augmentation import AugmentationRequest, AugmentationResult, Content, TextSegment
from app.services.prompt_service import (
    CONTENT_SEPARATOR,
    PROMPT_TEMPLATE,
    PromptService,
    build_augmentation_request,
    render_prompt,
)


class FakeAugmentor:
    """Returns fixed texts and records every request it receives."""

    def __init__(self, texts: list[str]) -> None:
        self.texts = texts
        self.requests: list[AugmentationRequest] = []

    def augment(self, request: AugmentationRequest) -> AugmentationResult:
        self.requests.append(request)
        return AugmentationResult(
            contents=[Content(text_segment=TextSegment(text=t)) for t in self.texts]
        )


class FailingAugmentor:
    def augment(self, request: AugmentationRequest) -> AugmentationResult:
        raise RuntimeError("retriever down")


class TestTemplate:
    def test_has_both_placeholders_once(self) -> None:
        assert PROMPT_TEMPLATE.count("QUESTION") == 1
        assert PROMPT_TEMPLATE.count("CONTENT_SUPPORT") == 1

    def test_layout(self) -> None:
        assert PROMPT_TEMPLATE.startswith(" **You are a Gosu-language expert.**")
        assert "# Question Section\n\nQUESTION\n\n# Content Support Section\n\nCONTENT_SUPPORT\n" in PROMPT_TEMPLATE
        assert PROMPT_TEMPLATE.endswith("CONTENT_SUPPORT\n")

    def test_separator(self) -> None:
        assert CONTENT_SEPARATOR == "\n\n ---- \n\n"


class TestBuildAugmentationRequest:
    def test_carries_question_and_empty_history(self) -> None:
        request = build_augmentation_request("What is Gosu?")
        assert request.user_message.text == "What is Gosu?"
        assert request.metadata.user_message.text == "What is Gosu?"
        assert request.metadata.chat_memory == []
        assert request.metadata.chat_memory_id

    def test_none_question_passes_through(self) -> None:
        request = build_augmentation_request(None)
        assert request.user_message.text is None

    def test_fresh_correlation_id_each_time(self) -> None:
        first = build_augmentation_request("q")
        second = build_augmentation_request("q")
        assert first.metadata.chat_memory_id != second.metadata.chat_memory_id


class TestRenderPrompt:
    def test_replaces_all_question_tokens(self) -> None:
        out = render_prompt("QUESTION or not", "")
        assert "# Question Section\n\nQUESTION or not\n\n" in out

    def test_question_containing_content_token_gets_content(self) -> None:
        out = render_prompt("see CONTENT_SUPPORT", "ctx")
        assert "# Question Section\n\nsee ctx\n\n" in out
        assert "CONTENT_SUPPORT" not in out

    def test_none_question_renders_empty(self) -> None:
        out = render_prompt(None, "")
        assert out == PROMPT_TEMPLATE.replace("QUESTION", "").replace("CONTENT_SUPPORT", "")


class TestPromptService:
    def test_zero_items_gives_empty_content(self) -> None:
        service = PromptService(FakeAugmentor([]))
        out = service.generate("How?")
        assert out == PROMPT_TEMPLATE.replace("QUESTION", "How?").replace("CONTENT_SUPPORT", "")

    def test_joins_items_in_order(self) -> None:
        service = PromptService(FakeAugmentor(["A", "B"]))
        out = service.generate("q")
        assert out.endswith("# Content Support Section\n\nA\n\n ---- \n\nB\n")

    def test_concrete_scenario(self) -> None:
        service = PromptService(FakeAugmentor(["Use var x : String"]))
        out = service.generate("How do I declare a variable?")
        assert "# Question Section\n\nHow do I declare a variable?" in out
        assert "# Content Support Section\n\nUse var x : String" in out

    def test_one_augment_call_per_generate(self) -> None:
        augmentor = FakeAugmentor(["x"])
        service = PromptService(augmentor)
        service.generate("first")
        service.generate("second")
        assert [r.user_message.text for r in augmentor.requests] == ["first", "second"]
        assert augmentor.requests[0].metadata.chat_memory_id != augmentor.requests[1].metadata.chat_memory_id

    def test_augmentor_error_propagates(self) -> None:
        service = PromptService(FailingAugmentor())
        with pytest.raises(RuntimeError, match="retriever down"):
            service.generate("q")
