"""
Generated Content Schemas
Tagged union of the five assessment shapes produced by the generator
"""

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ContentType(str, Enum):
    """Generated content type"""
    QUESTIONS = "questions"
    QUIZ = "quiz"
    FILL_IN_BLANKS = "fill_in_blanks"
    TRUE_FALSE = "true_false"
    SUBJECTIVE = "subjective"


# ==================== Items ====================


class QuizItem(BaseModel):
    """Multiple choice question"""
    model_config = ConfigDict(populate_by_name=True)

    question: str
    options: List[str] = Field(default_factory=list)
    correct_answer: str = Field(
        default="",
        validation_alias=AliasChoices("correctAnswer", "answer", "correct_answer"),
        serialization_alias="correctAnswer",
    )


class FillInBlankItem(BaseModel):
    """Sentence with one blank"""

    question: str
    answer: str = ""


class TrueFalseItem(BaseModel):
    """True/False statement"""

    question: str
    answer: bool
    explanation: str = ""


class SubjectiveItem(BaseModel):
    """Short/long answer question with grading hints"""
    model_config = ConfigDict(populate_by_name=True)

    question: str
    suggested_answer: str = Field(
        default="",
        validation_alias=AliasChoices("suggestedAnswer", "suggested_answer"),
        serialization_alias="suggestedAnswer",
    )
    key_points: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("keyPoints", "key_points"),
        serialization_alias="keyPoints",
    )


# ==================== Content variants ====================


class _ContentBase(BaseModel):
    """
    Common fields

    Attributes:
        degraded: True when the payload is a placeholder produced after a
            model invocation or parse failure
        error: failure message when degraded
    """
    degraded: bool = False
    error: Optional[str] = None


class QuestionsContent(_ContentBase):
    type: Literal["questions"] = "questions"
    data: List[str] = Field(default_factory=list)


class QuizContent(_ContentBase):
    type: Literal["quiz"] = "quiz"
    data: List[QuizItem] = Field(default_factory=list)


class FillInBlanksContent(_ContentBase):
    type: Literal["fill_in_blanks"] = "fill_in_blanks"
    data: List[FillInBlankItem] = Field(default_factory=list)


class TrueFalseContent(_ContentBase):
    type: Literal["true_false"] = "true_false"
    data: List[TrueFalseItem] = Field(default_factory=list)


class SubjectiveContent(_ContentBase):
    type: Literal["subjective"] = "subjective"
    data: List[SubjectiveItem] = Field(default_factory=list)


GeneratedContent = Annotated[
    Union[
        QuestionsContent,
        QuizContent,
        FillInBlanksContent,
        TrueFalseContent,
        SubjectiveContent,
    ],
    Field(discriminator="type"),
]
