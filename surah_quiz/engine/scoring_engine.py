"""Quiz Scoring Engine - Resultado final da sessao."""

from ..models.schemas import QuizResult
from .session import QuizSession


class QuizScoringEngine:
    """Calcula o resultado final de uma sessao.

    Cada pergunta vale 1 ponto; o percentual e arredondado em uma casa.

    Example:
        >>> engine = QuizScoringEngine()
        >>> engine.calculate_percentage(3, 7)
        42.9
    """

    @staticmethod
    def calculate_percentage(score: int, total: int) -> float:
        """Percentual de acerto (0 quando nao ha perguntas)."""
        if total <= 0:
            return 0.0
        return round(score / total * 100, 1)

    def summarize(self, session: QuizSession) -> QuizResult:
        """Resumo da sessao: score, total e percentual.

        Args:
            session: Sessao (normalmente ja completa)

        Returns:
            QuizResult
        """
        snapshot = session.snapshot()
        return QuizResult(
            score=snapshot.score,
            total_questions=snapshot.total_questions,
            percentage=self.calculate_percentage(snapshot.score, snapshot.total_questions),
        )
