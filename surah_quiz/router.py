"""Quiz Router - Endpoints FastAPI da sessao de quiz."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

import app_state

from .engine.scoring_engine import QuizScoringEngine
from .engine.session import QuizSession
from .exceptions import DataSourceError, InvalidInputError
from .models.enums import SessionPhase
from .models.schemas import (
    AnswerRequest,
    ChapterSummary,
    QuestionView,
    QuizResult,
    QuizStateResponse,
    SessionSnapshot,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quiz", tags=["Quiz"])


# =============================================================================
# HELPERS
# =============================================================================


def _idle_snapshot() -> SessionSnapshot:
    return SessionSnapshot(
        phase=SessionPhase.IDLE,
        current_index=0,
        score=0,
        total_questions=0,
        answered_count=0,
        is_complete=False,
    )


def _question_view(session: QuizSession) -> QuestionView | None:
    """Pergunta atual; a palavra correta so aparece apos a resposta."""
    question = session.current_question
    if question is None:
        return None

    selected = session.snapshot().selected_answer
    answered = selected is not None
    return QuestionView(
        verse_text=question.verse_text,
        verse_number=question.verse_number,
        hidden_word_index=question.hidden_word_index,
        choices=question.choices,
        correct_word=question.correct_word if answered else None,
        is_correct=(selected == question.correct_word) if answered else None,
    )


def _state_response() -> QuizStateResponse:
    session = app_state.session
    if session is None:
        return QuizStateResponse(state=_idle_snapshot())

    return QuizStateResponse(
        chapter_name=app_state.chapter_name,
        state=session.snapshot(),
        question=_question_view(session),
    )


def _require_session() -> QuizSession:
    if app_state.session is None:
        raise HTTPException(status_code=404, detail="Nenhuma sessao em andamento")
    return app_state.session


# =============================================================================
# CHAPTERS
# =============================================================================


@router.get("/chapters", response_model=list[ChapterSummary])
async def list_chapters():
    """Lista as surahs disponiveis.

    Falha da fonte externa vira 503; o cliente pode tentar de novo.
    """
    try:
        return await app_state.load_chapters()
    except DataSourceError as e:
        logger.error(f"Falha ao carregar surahs: {e.message} {e.details}")
        raise HTTPException(status_code=503, detail=e.to_dict()) from e


@router.post("/chapters/{chapter_id}/start", response_model=QuizStateResponse)
async def start_chapter(chapter_id: int):
    """Busca os versos da surah, gera as perguntas e inicia a sessao."""
    try:
        await app_state.start_chapter(chapter_id)
    except DataSourceError as e:
        logger.error(f"Falha ao carregar surah {chapter_id}: {e.message} {e.details}")
        raise HTTPException(status_code=503, detail=e.to_dict()) from e
    except InvalidInputError as e:
        logger.error(f"Versos invalidos na surah {chapter_id}: {e.message} {e.details}")
        raise HTTPException(status_code=422, detail=e.to_dict()) from e

    return _state_response()


# =============================================================================
# SESSION TRANSITIONS
# =============================================================================


@router.get("/state", response_model=QuizStateResponse)
async def get_state():
    """Snapshot da sessao e pergunta atual."""
    return _state_response()


@router.post("/answer", response_model=QuizStateResponse)
async def submit_answer(request: AnswerRequest):
    """Submete uma alternativa (ignorado se ja respondida)."""
    _require_session().submit_answer(request.choice)
    return _state_response()


@router.post("/advance", response_model=QuizStateResponse)
async def advance():
    """Avanca para a proxima pergunta (ignorado sem resposta)."""
    _require_session().advance()
    return _state_response()


@router.post("/restart", response_model=QuizStateResponse)
async def restart():
    """Descarta a sessao e volta a selecao de surah."""
    app_state.clear_session()
    return _state_response()


@router.get("/results", response_model=QuizResult)
async def get_results():
    """Resultado final (apenas com a sessao completa)."""
    session = _require_session()
    if not session.is_complete:
        raise HTTPException(status_code=409, detail="Sessao ainda em andamento")

    return QuizScoringEngine().summarize(session)
