"""Quiz Models - Enums, Schemas e State."""

from .enums import SessionPhase
from .schemas import (
    AnswerRequest,
    ChapterSummary,
    ChapterText,
    Question,
    QuestionView,
    QuizResult,
    QuizStateResponse,
    SessionSnapshot,
    Verse,
)
from .state import Active, Complete, Idle, QuizState

__all__ = [
    # Enums
    "SessionPhase",
    # Schemas
    "Verse",
    "ChapterSummary",
    "ChapterText",
    "Question",
    "SessionSnapshot",
    "QuestionView",
    "QuizStateResponse",
    "AnswerRequest",
    "QuizResult",
    # State
    "Idle",
    "Active",
    "Complete",
    "QuizState",
]
