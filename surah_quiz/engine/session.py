"""Quiz Session - Maquina de estados de uma sessao de quiz."""

import logging
from typing import Optional, Sequence

from ..exceptions import InvalidInputError
from ..models.enums import SessionPhase
from ..models.schemas import Question, SessionSnapshot
from ..models.state import Active, Complete, Idle, QuizState

logger = logging.getLogger(__name__)


class QuizSession:
    """Conduz uma sessao pergunta a pergunta.

    Estados: ``Active`` -> ``Complete``; ``restart()`` leva a ``Idle``
    de qualquer estado. Chamadas invalidas sao ignoradas (no-op), nunca
    levantam excecao.

    Example:
        >>> session = QuizSession(questions)
        >>> session.submit_answer(questions[0].correct_word)
        >>> session.advance()
        >>> session.snapshot().score
        1
    """

    def __init__(self, questions: Sequence[Question]):
        """Inicia sessao em Active(0, None, 0).

        Raises:
            InvalidInputError: Lista de perguntas vazia
        """
        if not questions:
            raise InvalidInputError("Sessao precisa de ao menos uma pergunta")

        self._questions: tuple[Question, ...] = tuple(questions)
        self._state: QuizState = Active()

    @property
    def state(self) -> QuizState:
        return self._state

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def is_complete(self) -> bool:
        return isinstance(self._state, Complete)

    @property
    def current_question(self) -> Optional[Question]:
        """Pergunta atual (None fora de Active)."""
        if isinstance(self._state, Active):
            return self._questions[self._state.current_index]
        return None

    # -------------------------------------------------------------------------
    # Transicoes
    # -------------------------------------------------------------------------

    def submit_answer(self, choice: str) -> QuizState:
        """Registra a resposta da pergunta atual.

        Ignorado se ja houver resposta (protege contra duplo toque) ou fora
        de Active. Unico ponto onde o score muda.
        """
        state = self._state
        if not isinstance(state, Active) or state.answered:
            logger.debug(f"submit_answer ignorado em {state!r}")
            return state

        question = self._questions[state.current_index]
        is_correct = choice == question.correct_word

        self._state = Active(
            current_index=state.current_index,
            selected_answer=choice,
            score=state.score + 1 if is_correct else state.score,
        )
        return self._state

    def advance(self) -> QuizState:
        """Avanca para a proxima pergunta ou encerra na ultima.

        Ignorado enquanto a pergunta atual nao foi respondida.
        """
        state = self._state
        if not isinstance(state, Active) or not state.answered:
            logger.debug(f"advance ignorado em {state!r}")
            return state

        if state.current_index + 1 == len(self._questions):
            self._state = Complete(score=state.score)
            logger.info(f"Sessao completa: {state.score}/{len(self._questions)}")
        else:
            self._state = Active(current_index=state.current_index + 1, score=state.score)
        return self._state

    def restart(self) -> QuizState:
        """Descarta os dados da sessao e volta a selecao de surah."""
        self._questions = ()
        self._state = Idle()
        return self._state

    # -------------------------------------------------------------------------
    # Leitura
    # -------------------------------------------------------------------------

    def snapshot(self) -> SessionSnapshot:
        """Visao somente-leitura do estado atual."""
        total = len(self._questions)
        state = self._state

        if isinstance(state, Active):
            return SessionSnapshot(
                phase=SessionPhase.ACTIVE,
                current_index=state.current_index,
                selected_answer=state.selected_answer,
                score=state.score,
                total_questions=total,
                answered_count=state.current_index + (1 if state.answered else 0),
                is_complete=False,
            )

        if isinstance(state, Complete):
            return SessionSnapshot(
                phase=SessionPhase.COMPLETE,
                current_index=total,
                score=state.score,
                total_questions=total,
                answered_count=total,
                is_complete=True,
            )

        return SessionSnapshot(
            phase=SessionPhase.IDLE,
            current_index=0,
            score=0,
            total_questions=0,
            answered_count=0,
            is_complete=False,
        )
