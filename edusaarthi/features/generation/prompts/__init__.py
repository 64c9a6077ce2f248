from .base import AssessmentPrompt
from .questions_prompt import GenerateQuestionsPrompt
from .quiz_prompt import GenerateQuizPrompt
from .fill_in_blanks_prompt import GenerateFillInBlanksPrompt
from .true_false_prompt import GenerateTrueFalsePrompt
from .subjective_prompt import GenerateSubjectivePrompt

__all__ = [
    "AssessmentPrompt",
    "GenerateQuestionsPrompt",
    "GenerateQuizPrompt",
    "GenerateFillInBlanksPrompt",
    "GenerateTrueFalsePrompt",
    "GenerateSubjectivePrompt",
]
