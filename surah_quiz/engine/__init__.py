"""Quiz Engines - Logica de negocios."""

from .question_generator import QuestionGenerator, strip_invocation
from .random_source import RandomSource, default_random_source
from .scoring_engine import QuizScoringEngine
from .session import QuizSession
from .vocabulary import Vocabulary, tokenize

__all__ = [
    "QuestionGenerator",
    "QuizSession",
    "QuizScoringEngine",
    "RandomSource",
    "Vocabulary",
    "default_random_source",
    "strip_invocation",
    "tokenize",
]
