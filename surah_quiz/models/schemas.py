"""Quiz Schemas - Modelos Pydantic do dominio e request/response."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import SessionPhase


class Verse(BaseModel):
    """Verso (ayah) de uma surah."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Texto do verso")
    number_in_chapter: int = Field(..., ge=1, description="Numero do verso na surah")


class ChapterSummary(BaseModel):
    """Entrada da lista de surahs."""

    number: int = Field(..., ge=1, description="Numero da surah")
    name: str = Field(..., description="Nome na escrita original")
    english_name: str = Field(default="", description="Nome transliterado")
    number_of_verses: int | None = Field(None, description="Quantidade de versos")


class ChapterText(BaseModel):
    """Texto completo de uma surah, em ordem."""

    display_name: str = Field(..., description="Nome exibido da surah")
    verses: list[Verse] = Field(..., description="Versos em ordem")


class Question(BaseModel):
    """Pergunta de lacuna: uma palavra do verso escondida entre alternativas."""

    model_config = ConfigDict(frozen=True)

    verse_text: str = Field(..., description="Texto do verso (ja sem a basmala)")
    verse_number: int = Field(..., description="Numero do verso na surah")
    hidden_word_index: int = Field(..., ge=0, description="Indice da palavra escondida")
    correct_word: str = Field(..., description="Palavra escondida")
    choices: list[str] = Field(..., min_length=1, description="Alternativas embaralhadas")

    @model_validator(mode="after")
    def _check_invariants(self) -> "Question":
        words = self.verse_text.split()
        if self.hidden_word_index >= len(words):
            raise ValueError(
                f"hidden_word_index {self.hidden_word_index} fora do verso ({len(words)} palavras)"
            )
        if words[self.hidden_word_index] != self.correct_word:
            raise ValueError("correct_word nao corresponde a palavra escondida")
        if self.choices.count(self.correct_word) != 1:
            raise ValueError("correct_word deve aparecer exatamente uma vez em choices")
        if len(set(self.choices)) != len(self.choices):
            raise ValueError("choices contem alternativas repetidas")
        return self

    @property
    def words(self) -> list[str]:
        """Tokens do verso, na ordem."""
        return self.verse_text.split()


class SessionSnapshot(BaseModel):
    """Visao somente-leitura do estado da sessao."""

    phase: SessionPhase
    current_index: int
    selected_answer: str | None = None
    score: int
    total_questions: int
    answered_count: int
    is_complete: bool


class QuestionView(BaseModel):
    """Pergunta atual como exposta ao chamador.

    A palavra correta so e revelada apos uma resposta.
    """

    verse_text: str
    verse_number: int
    hidden_word_index: int
    choices: list[str]
    correct_word: str | None = None
    is_correct: bool | None = None


class QuizStateResponse(BaseModel):
    """Response com snapshot e pergunta atual."""

    chapter_name: str = ""
    state: SessionSnapshot
    question: QuestionView | None = None


class AnswerRequest(BaseModel):
    """Request para submeter uma alternativa."""

    choice: str = Field(..., description="Alternativa escolhida")


class QuizResult(BaseModel):
    """Resultado final da sessao."""

    score: int = Field(..., ge=0, description="Respostas corretas")
    total_questions: int = Field(..., ge=0, description="Total de perguntas")
    percentage: float = Field(..., description="Percentual de acerto")
