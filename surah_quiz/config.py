"""Quiz Config - Configuracao centralizada via variaveis de ambiente."""

import os
from dataclasses import dataclass
from typing import Optional

# Basmala exatamente como a fonte remota a grafa
BASMALA = "بِسۡمِ ٱللَّهِ ٱلرَّحۡمَـٰنِ ٱلرَّحِیمِ"

DEFAULT_CHAPTERS_URL = "https://quran-proxy.zuha.dev"
DEFAULT_VERSES_URL = "https://surah-proxy.zuha.dev/"
DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_CHOICES = 4


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.environ[name])
    except (KeyError, ValueError):
        return default


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    try:
        return int(os.environ[name])
    except (KeyError, ValueError):
        return default


@dataclass
class QuizConfig:
    """Configuracao do quiz.

    Attributes:
        chapters_url: Endpoint da lista de surahs
        verses_url: Endpoint dos versos de uma surah (?number=N)
        request_timeout: Timeout das requisicoes HTTP (segundos)
        max_choices: Maximo de alternativas por pergunta (1 correta + distratores)
        invocation_phrase: Frase removida do primeiro verso quando seguida de texto
        seed: Seed opcional para geracao reprodutivel
        log_level: Nivel de log do servidor
    """

    chapters_url: str = DEFAULT_CHAPTERS_URL
    verses_url: str = DEFAULT_VERSES_URL
    request_timeout: float = DEFAULT_TIMEOUT
    max_choices: int = DEFAULT_MAX_CHOICES
    invocation_phrase: str = BASMALA
    seed: Optional[int] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "QuizConfig":
        """Cria configuracao a partir das variaveis de ambiente.

        Valores numericos invalidos caem no default.
        """
        max_choices = _env_int("SURAH_QUIZ_MAX_CHOICES", DEFAULT_MAX_CHOICES)
        if max_choices is None or max_choices < 1:
            max_choices = DEFAULT_MAX_CHOICES

        timeout = _env_float("SURAH_QUIZ_TIMEOUT", DEFAULT_TIMEOUT)
        if not timeout > 0:
            timeout = DEFAULT_TIMEOUT

        return cls(
            chapters_url=os.getenv("SURAH_QUIZ_CHAPTERS_URL", DEFAULT_CHAPTERS_URL),
            verses_url=os.getenv("SURAH_QUIZ_VERSES_URL", DEFAULT_VERSES_URL),
            request_timeout=timeout,
            max_choices=max_choices,
            invocation_phrase=os.getenv("SURAH_QUIZ_INVOCATION") or BASMALA,
            seed=_env_int("SURAH_QUIZ_SEED", None),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
