"""Surah Quiz - Quiz de lacunas sobre os versos de uma surah.

Arquitetura:
- models/: Enums, Schemas Pydantic, estados da sessao
- engine/: QuestionGenerator, QuizSession, QuizScoringEngine, Vocabulary
- source/: ChapterTextSource (fonte HTTP via httpx)
- exceptions.py: InvalidInputError, DataSourceError
- config.py: QuizConfig (variaveis de ambiente)
- router.py: FastAPI endpoints
"""

from .config import QuizConfig
from .engine import QuestionGenerator, QuizScoringEngine, QuizSession, Vocabulary
from .exceptions import DataSourceError, InvalidInputError, QuizError
from .models import ChapterSummary, ChapterText, Question, SessionSnapshot, Verse
from .source import ChapterTextSource, HttpChapterTextSource

__all__ = [
    # Config
    "QuizConfig",
    # Models
    "Verse",
    "ChapterSummary",
    "ChapterText",
    "Question",
    "SessionSnapshot",
    # Engines
    "QuestionGenerator",
    "QuizSession",
    "QuizScoringEngine",
    "Vocabulary",
    # Source
    "ChapterTextSource",
    "HttpChapterTextSource",
    # Errors
    "QuizError",
    "InvalidInputError",
    "DataSourceError",
]
