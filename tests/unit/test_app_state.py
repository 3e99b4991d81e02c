# =============================================================================
# TESTES - App State Module
# =============================================================================
# Testes unitarios para pedidos concorrentes de sessao
# =============================================================================

import asyncio
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
def gated_source(mock_source, make_verses):
    """Fonte mock cujo get_verses espera um evento por surah."""
    from surah_quiz.models.schemas import ChapterText

    gates = {1: asyncio.Event(), 2: asyncio.Event()}

    async def get_verses(chapter_id):
        await gates[chapter_id].wait()
        return ChapterText(
            display_name=f"ch{chapter_id}",
            verses=make_verses("A B C", "D E"),
        )

    mock_source.get_verses = AsyncMock(side_effect=get_verses)
    return gates


class TestOverlappingStarts:
    """Testes para start_chapter sobreposto."""

    @pytest.mark.asyncio
    async def test_latest_request_wins(self, clean_app_state, gated_source):
        """Verifica que o pedido mais antigo nao sobrescreve o mais recente."""
        slow = asyncio.create_task(clean_app_state.start_chapter(1))
        await asyncio.sleep(0)

        gated_source[2].set()
        await clean_app_state.start_chapter(2)

        assert clean_app_state.chapter_name == "ch2"
        assert clean_app_state.loading is True

        gated_source[1].set()
        stale = await slow

        assert clean_app_state.chapter_name == "ch2"
        assert clean_app_state.session is not stale
        assert clean_app_state.loading is False

    @pytest.mark.asyncio
    async def test_restart_discards_pending_start(self, clean_app_state, gated_source):
        """Verifica que restart invalida um start em andamento."""
        pending = asyncio.create_task(clean_app_state.start_chapter(1))
        await asyncio.sleep(0)

        clean_app_state.clear_session()
        gated_source[1].set()
        await pending

        assert clean_app_state.session is None
        assert clean_app_state.chapter_name == ""
        assert clean_app_state.loading is False


class TestLoadingFlag:
    """Testes para o indicador de carregamento."""

    @pytest.mark.asyncio
    async def test_loading_cleared_after_failure(self, clean_app_state, mock_source):
        """Verifica que falha da fonte nao deixa loading preso."""
        from surah_quiz.exceptions import DataSourceError

        mock_source.list_chapters = AsyncMock(side_effect=DataSourceError("offline"))

        with pytest.raises(DataSourceError):
            await clean_app_state.load_chapters()

        assert clean_app_state.loading is False
        assert clean_app_state._in_flight == 0
