"""Chapter Source - Fonte externa da lista de surahs e dos versos."""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import httpx
from pydantic import ValidationError

from ..config import QuizConfig
from ..exceptions import DataSourceError
from ..models.schemas import ChapterSummary, ChapterText, Verse

logger = logging.getLogger(__name__)


class ChapterTextSource(Protocol):
    """Colaborador externo que fornece o texto das surahs."""

    async def list_chapters(self) -> list[ChapterSummary]:
        ...

    async def get_verses(self, chapter_id: int) -> ChapterText:
        ...


class HttpChapterTextSource:
    """Busca surahs e versos nos proxies JSON via httpx.

    Formatos esperados:
        - lista: ``{"data": [{"number", "name", "englishName", ...}]}``
        - versos: ``{"data": {"name", "ayahs": [{"text", "numberInSurah"}]}}``

    Qualquer falha (rede, status HTTP, JSON invalido, payload malformado)
    vira DataSourceError. Nao ha retry.

    Example:
        >>> async with HttpChapterTextSource(QuizConfig.from_env()) as source:
        ...     chapters = await source.list_chapters()
    """

    def __init__(
        self,
        config: Optional[QuizConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or QuizConfig()
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=self.config.request_timeout)

    async def __aenter__(self) -> HttpChapterTextSource:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Fecha o cliente HTTP se foi criado aqui."""
        if self._owns_client:
            await self.client.aclose()

    async def _get_json(self, url: str, params: Optional[dict[str, Any]] = None) -> Any:
        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise DataSourceError(
                "Resposta HTTP invalida da fonte",
                details={"url": url, "status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            raise DataSourceError(
                "Falha de rede ao acessar a fonte",
                details={"url": url, "error": str(e)},
            ) from e
        except ValueError as e:
            raise DataSourceError(
                "Payload nao e JSON valido",
                details={"url": url},
            ) from e

    async def list_chapters(self) -> list[ChapterSummary]:
        """Lista as surahs disponiveis."""
        payload = await self._get_json(self.config.chapters_url)

        try:
            chapters = [
                ChapterSummary(
                    number=item["number"],
                    name=item["name"],
                    english_name=item.get("englishName", ""),
                    number_of_verses=item.get("numberOfAyahs"),
                )
                for item in payload["data"]
            ]
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            raise DataSourceError(
                "Lista de surahs malformada",
                details={"url": self.config.chapters_url},
            ) from e

        logger.info(f"{len(chapters)} surahs carregadas")
        return chapters

    async def get_verses(self, chapter_id: int) -> ChapterText:
        """Busca os versos de uma surah, em ordem."""
        payload = await self._get_json(self.config.verses_url, params={"number": chapter_id})

        try:
            data = payload["data"]
            chapter = ChapterText(
                display_name=data["name"],
                verses=[
                    Verse(text=ayah["text"], number_in_chapter=ayah["numberInSurah"])
                    for ayah in data["ayahs"]
                ],
            )
        except (KeyError, TypeError, ValidationError) as e:
            raise DataSourceError(
                "Versos da surah malformados",
                details={"chapter_id": chapter_id},
            ) from e

        logger.info(f"Surah {chapter_id} carregada: {len(chapter.verses)} versos")
        return chapter
