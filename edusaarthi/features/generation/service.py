"""
Content Generator
Fail-soft generation of assessment content with a language model
"""

from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError

from edusaarthi.core.config import settings
from edusaarthi.core.logging import get_logger
from edusaarthi.core.utils.trace import log_process
from edusaarthi.infrastructure.ai.base import TextGenerationProvider
from .parsing import ResponseParseError, parse_json_array
from .prompts import (
    AssessmentPrompt,
    GenerateFillInBlanksPrompt,
    GenerateQuestionsPrompt,
    GenerateQuizPrompt,
    GenerateSubjectivePrompt,
    GenerateTrueFalsePrompt,
)
from .schemas import (
    ContentType,
    FillInBlankItem,
    FillInBlanksContent,
    GeneratedContent,
    QuestionsContent,
    QuizContent,
    QuizItem,
    SubjectiveContent,
    SubjectiveItem,
    TrueFalseContent,
    TrueFalseItem,
)

logger = get_logger(__name__)


# ==================== Degraded placeholders ====================


def _degraded_questions(error: str) -> QuestionsContent:
    return QuestionsContent(
        data=[
            "Analyze the core principles of the subject matter.",
            "Evaluate the practical applications of the key concepts identified.",
            f"Question generation could not be completed ({error}). Review the source material directly.",
        ],
        degraded=True,
        error=error,
    )


def _degraded_quiz(error: str) -> QuizContent:
    return QuizContent(
        data=[
            QuizItem(
                question="Quiz generation could not be completed for this document. Which action is recommended?",
                options=[
                    "Review the source material directly",
                    "Schedule the task again later",
                    "Contact the administrator",
                    "All options are valid",
                ],
                correct_answer="All options are valid",
            )
        ],
        degraded=True,
        error=error,
    )


def _degraded_fill_in_blanks(error: str) -> FillInBlanksContent:
    return FillInBlanksContent(
        data=[
            FillInBlankItem(
                question="Fill-in-the-blank generation could not be completed. Please review the __________ directly.",
                answer="source material",
            )
        ],
        degraded=True,
        error=error,
    )


def _degraded_true_false(error: str) -> TrueFalseContent:
    return TrueFalseContent(
        data=[
            TrueFalseItem(
                question="Automatic true/false generation succeeded for this document.",
                answer=False,
                explanation=f"The language model request failed ({error}). Review the source material directly.",
            )
        ],
        degraded=True,
        error=error,
    )


def _degraded_subjective(error: str) -> SubjectiveContent:
    return SubjectiveContent(
        data=[
            SubjectiveItem(
                question="Summarize the key concepts of the source material in your own words.",
                suggested_answer="Subjective question generation could not be completed. Use the source material as reference.",
                key_points=["Core concepts", "Practical applications"],
            )
        ],
        degraded=True,
        error=error,
    )


# ==================== Item normalisation ====================


def _normalize_questions(raw_items: List[Any]) -> List[str]:
    """Keep non-empty strings. Objects carrying a question field are unwrapped."""
    questions: List[str] = []
    for item in raw_items:
        if isinstance(item, dict):
            item = item.get("question")
        if isinstance(item, str) and item.strip():
            questions.append(item.strip())
    return questions


def _validate_items(raw_items: List[Any], item_model: Type[BaseModel]) -> List[BaseModel]:
    """Validate each item, dropping the ones that do not fit the shape"""
    items = []
    for index, raw in enumerate(raw_items):
        try:
            items.append(item_model.model_validate(raw))
        except ValidationError as e:
            logger.warning(
                f"Skipping invalid {item_model.__name__} at index {index}",
                errors=e.error_count(),
            )
    return items


class ContentGenerator:
    """
    Assessment content generator

    Every public method returns a GeneratedContent of the requested type. Model
    or parse failures never propagate: a degraded placeholder is returned and
    the failure is logged.
    """

    def __init__(
        self,
        ai_provider: TextGenerationProvider,
        max_input_chars: Optional[int] = None,
        temperature: Optional[float] = None,
    ):
        self.ai_provider = ai_provider
        self.max_input_chars = max_input_chars or settings.generation_max_input_chars
        self.temperature = temperature
        self._dispatch: Dict[ContentType, Callable] = {
            ContentType.QUESTIONS: self.generate_questions,
            ContentType.QUIZ: self.generate_quiz,
            ContentType.FILL_IN_BLANKS: self.generate_fill_in_blanks,
            ContentType.TRUE_FALSE: self.generate_true_false,
            ContentType.SUBJECTIVE: self.generate_subjective,
        }

    async def generate(
        self,
        content_type: ContentType,
        text: str,
        count: int = 5,
        additional_instructions: str = "",
    ) -> GeneratedContent:
        """
        Generate content of the given type

        Args:
            content_type: Requested content type
            text: Source document text
            count: Requested number of items (advisory)
            additional_instructions: Free-form user guidance

        Returns:
            GeneratedContent: never raises for model or parse failures
        """
        handler = self._dispatch[ContentType(content_type)]
        return await handler(text, count, additional_instructions)

    async def _invoke(self, prompt: AssessmentPrompt) -> List[Any]:
        raw = await self.ai_provider.generate_text(
            prompt.render(), temperature=self.temperature
        )
        return parse_json_array(raw)

    def _prompt_kwargs(self, text: str, count: int, additional_instructions: str) -> Dict[str, Any]:
        return {
            "text": text,
            "count": count,
            "additional_instructions": additional_instructions or "",
            "max_input_chars": self.max_input_chars,
        }

    def _log_degraded(self, content_type: ContentType, error: Exception) -> str:
        message = str(error) or error.__class__.__name__
        logger.warning(
            f"{content_type.value} generation degraded: {message}",
            content_type=content_type.value,
            error_type=error.__class__.__name__,
        )
        return message

    # ==================== Content types ====================

    @log_process(step="Generate Questions", desc="open-ended question generation")
    async def generate_questions(
        self, text: str, count: int = 5, additional_instructions: str = ""
    ) -> QuestionsContent:
        try:
            raw_items = await self._invoke(
                GenerateQuestionsPrompt(**self._prompt_kwargs(text, count, additional_instructions))
            )
            questions = _normalize_questions(raw_items)
            if not questions:
                raise ResponseParseError("Model response contained no usable questions")
            return QuestionsContent(data=questions)
        except Exception as e:
            return _degraded_questions(self._log_degraded(ContentType.QUESTIONS, e))

    @log_process(step="Generate Quiz", desc="multiple choice generation")
    async def generate_quiz(
        self, text: str, count: int = 5, additional_instructions: str = ""
    ) -> QuizContent:
        try:
            raw_items = await self._invoke(
                GenerateQuizPrompt(**self._prompt_kwargs(text, count, additional_instructions))
            )
            items = _validate_items(raw_items, QuizItem)
            if not items:
                raise ResponseParseError("Model response contained no usable quiz items")
            return QuizContent(data=items)
        except Exception as e:
            return _degraded_quiz(self._log_degraded(ContentType.QUIZ, e))

    @log_process(step="Generate Fill In Blanks", desc="fill-in-the-blank generation")
    async def generate_fill_in_blanks(
        self, text: str, count: int = 5, additional_instructions: str = ""
    ) -> FillInBlanksContent:
        try:
            raw_items = await self._invoke(
                GenerateFillInBlanksPrompt(**self._prompt_kwargs(text, count, additional_instructions))
            )
            items = _validate_items(raw_items, FillInBlankItem)
            if not items:
                raise ResponseParseError("Model response contained no usable fill-in-the-blank items")
            return FillInBlanksContent(data=items)
        except Exception as e:
            return _degraded_fill_in_blanks(self._log_degraded(ContentType.FILL_IN_BLANKS, e))

    @log_process(step="Generate True False", desc="true/false generation")
    async def generate_true_false(
        self, text: str, count: int = 5, additional_instructions: str = ""
    ) -> TrueFalseContent:
        try:
            raw_items = await self._invoke(
                GenerateTrueFalsePrompt(**self._prompt_kwargs(text, count, additional_instructions))
            )
            items = _validate_items(raw_items, TrueFalseItem)
            if not items:
                raise ResponseParseError("Model response contained no usable true/false items")
            return TrueFalseContent(data=items)
        except Exception as e:
            return _degraded_true_false(self._log_degraded(ContentType.TRUE_FALSE, e))

    @log_process(step="Generate Subjective", desc="subjective question generation")
    async def generate_subjective(
        self, text: str, count: int = 5, additional_instructions: str = ""
    ) -> SubjectiveContent:
        try:
            raw_items = await self._invoke(
                GenerateSubjectivePrompt(**self._prompt_kwargs(text, count, additional_instructions))
            )
            items = _validate_items(raw_items, SubjectiveItem)
            if not items:
                raise ResponseParseError("Model response contained no usable subjective items")
            return SubjectiveContent(data=items)
        except Exception as e:
            return _degraded_subjective(self._log_degraded(ContentType.SUBJECTIVE, e))
