"""Quiz Enums - Fases da sessao."""

from enum import Enum


class SessionPhase(str, Enum):
    """Fase da sessao de quiz."""

    IDLE = "idle"  # Sem perguntas (selecao de surah)
    ACTIVE = "active"  # Respondendo perguntas
    COMPLETE = "complete"  # Ultima pergunta avancada
