"""Quiz Exceptions - Taxonomia de erros do quiz."""

from typing import Any, Optional


class QuizError(Exception):
    """Erro base do quiz.

    Attributes:
        message: Mensagem legivel do erro
        details: Contexto adicional (ids, trechos, status HTTP)
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Converte para dicionario (para respostas HTTP e logs)."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidInputError(QuizError):
    """Dados de versos invalidos ou vazios (violacao de contrato)."""


class DataSourceError(QuizError):
    """Falha na fonte externa de texto (rede ou payload malformado)."""
