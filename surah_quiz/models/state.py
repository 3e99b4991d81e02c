"""Quiz State - Variantes do estado da sessao."""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Idle:
    """Sem sessao em andamento (volta a selecao de surah)."""


@dataclass(frozen=True)
class Active:
    """Sessao respondendo perguntas.

    Attributes:
        current_index: Indice da pergunta atual
        selected_answer: Alternativa submetida (None ate responder)
        score: Respostas corretas ate aqui
    """

    current_index: int = 0
    selected_answer: Optional[str] = None
    score: int = 0

    @property
    def answered(self) -> bool:
        return self.selected_answer is not None


@dataclass(frozen=True)
class Complete:
    """Sessao encerrada com pontuacao final."""

    score: int


QuizState = Union[Idle, Active, Complete]
