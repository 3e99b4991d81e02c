"""Core module - shared state and helper functions."""

from __future__ import annotations

import logging
from typing import Optional

from surah_quiz.config import QuizConfig
from surah_quiz.engine import QuestionGenerator, QuizSession, default_random_source
from surah_quiz.models import ChapterSummary
from surah_quiz.source import ChapterTextSource, HttpChapterTextSource

logger = logging.getLogger(__name__)

# =============================================================================
# GLOBAL STATE
# =============================================================================

config: QuizConfig = QuizConfig()
source: Optional[ChapterTextSource] = None
generator: Optional[QuestionGenerator] = None

# Lista de surahs (carregada no startup; vazia se a fonte falhar)
chapters: list[ChapterSummary] = []

# Sessao atual (uma por processo)
session: Optional[QuizSession] = None
chapter_name: str = ""
loading: bool = False

# Controle de pedidos concorrentes
_in_flight: int = 0
_start_token: int = 0


# =============================================================================
# SETUP
# =============================================================================


def configure(
    new_config: Optional[QuizConfig] = None,
    new_source: Optional[ChapterTextSource] = None,
) -> None:
    """Configura fonte e gerador.

    Args:
        new_config: Configuracao (default: QuizConfig.from_env())
        new_source: Fonte customizada (default: HttpChapterTextSource)
    """
    global config, source, generator

    config = new_config or QuizConfig.from_env()
    source = new_source or HttpChapterTextSource(config)
    generator = QuestionGenerator(
        random_source=default_random_source(config.seed),
        max_choices=config.max_choices,
        invocation_phrase=config.invocation_phrase,
    )


def get_source() -> ChapterTextSource:
    """Get ChapterTextSource instance."""
    if source is None:
        configure()
    return source


def get_generator() -> QuestionGenerator:
    """Get QuestionGenerator instance."""
    if generator is None:
        configure()
    return generator


# =============================================================================
# SESSION MANAGEMENT
# =============================================================================


def _begin_fetch() -> None:
    global _in_flight, loading

    _in_flight += 1
    loading = True


def _end_fetch() -> None:
    global _in_flight, loading

    _in_flight -= 1
    loading = _in_flight > 0


async def load_chapters() -> list[ChapterSummary]:
    """Carrega a lista de surahs (DataSourceError propaga ao chamador)."""
    global chapters

    _begin_fetch()
    try:
        chapters = await get_source().list_chapters()
    finally:
        _end_fetch()
    return chapters


async def start_chapter(chapter_id: int) -> QuizSession:
    """Busca os versos, gera as perguntas e inicia uma nova sessao.

    Apenas o pedido mais recente instala sua sessao; um pedido mais antigo
    que termine depois (ou um restart no meio) descarta o resultado.

    Returns:
        Sessao gerada por este pedido (instalada ou nao)

    Raises:
        DataSourceError: Falha da fonte externa
        InvalidInputError: Versos vazios ou malformados
    """
    global session, chapter_name, _start_token

    _start_token += 1
    token = _start_token

    _begin_fetch()
    try:
        chapter = await get_source().get_verses(chapter_id)
        gen = get_generator()
        vocabulary = gen.build_vocabulary(chapter.verses)
        questions = gen.generate(chapter.verses, vocabulary)
    finally:
        _end_fetch()

    new_session = QuizSession(questions)
    if token != _start_token:
        logger.debug(f"Resultado da surah {chapter_id} descartado (pedido superado)")
        return new_session

    session = new_session
    chapter_name = chapter.display_name
    logger.info(f"Sessao iniciada: surah {chapter_id} ({len(questions)} perguntas)")
    return session


def clear_session() -> None:
    """Descarta a sessao atual (volta a selecao de surah).

    Pedidos de start ainda em andamento deixam de valer.
    """
    global session, chapter_name, _start_token

    _start_token += 1

    if session is not None:
        session.restart()
    session = None
    chapter_name = ""


async def cleanup() -> None:
    """Cleanup resources on shutdown."""
    global source

    clear_session()
    if isinstance(source, HttpChapterTextSource):
        await source.close()
    source = None
