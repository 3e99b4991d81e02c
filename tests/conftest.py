# =============================================================================
# CONFTEST - Fixtures compartilhadas para todos os testes
# =============================================================================
# Centraliza mocks, fixtures e configurações comuns
# =============================================================================

from unittest.mock import AsyncMock, MagicMock

import pytest

INVOCATION = "In the name of God, the Merciful, the Compassionate"


# =============================================================================
# FIXTURES DE ALEATORIEDADE
# =============================================================================


class ScriptedRandom:
    """RandomSource com sequencia fixa de indices.

    ``randrange`` consome os valores na ordem (limitados a stop - 1) e
    devolve 0 quando a sequencia acaba; ``shuffle`` inverte a lista.
    """

    def __init__(self, values=None, reverse_on_shuffle=True):
        self.values = list(values or [])
        self.reverse_on_shuffle = reverse_on_shuffle
        self.randrange_calls = []
        self.shuffle_calls = 0

    def randrange(self, stop):
        self.randrange_calls.append(stop)
        if not self.values:
            return 0
        return min(self.values.pop(0), stop - 1)

    def shuffle(self, x):
        self.shuffle_calls += 1
        if self.reverse_on_shuffle:
            x.reverse()


@pytest.fixture
def scripted_random():
    """Factory de ScriptedRandom."""

    def _make(values=None, reverse_on_shuffle=True):
        return ScriptedRandom(values, reverse_on_shuffle)

    return _make


# =============================================================================
# FIXTURES DO QUIZ
# =============================================================================


@pytest.fixture
def make_verses():
    """Factory de versos numerados a partir de textos."""
    from surah_quiz.models.schemas import Verse

    def _make(*texts):
        return [Verse(text=t, number_in_chapter=i + 1) for i, t in enumerate(texts)]

    return _make


@pytest.fixture
def sample_verses(make_verses):
    """Surah de exemplo com dois versos."""
    return make_verses("A B C", "D E")


@pytest.fixture
def generator(scripted_random):
    """QuestionGenerator com aleatoriedade fixa e invocacao em ingles."""
    from surah_quiz.engine.question_generator import QuestionGenerator

    return QuestionGenerator(
        random_source=scripted_random(),
        invocation_phrase=INVOCATION,
    )


@pytest.fixture
def sample_questions():
    """Duas perguntas fixas para testes de sessao."""
    from surah_quiz.models.schemas import Question

    return [
        Question(
            verse_text="A B C",
            verse_number=1,
            hidden_word_index=1,
            correct_word="B",
            choices=["D", "B", "A", "E"],
        ),
        Question(
            verse_text="D E",
            verse_number=2,
            hidden_word_index=0,
            correct_word="D",
            choices=["C", "A", "D", "B"],
        ),
    ]


@pytest.fixture
def sample_session(sample_questions):
    """QuizSession ativa sobre sample_questions."""
    from surah_quiz.engine.session import QuizSession

    return QuizSession(sample_questions)


# =============================================================================
# FIXTURES DA FONTE
# =============================================================================


@pytest.fixture
def sample_chapter(sample_verses):
    """ChapterText de exemplo."""
    from surah_quiz.models.schemas import ChapterText

    return ChapterText(display_name="سورة الاختبار", verses=sample_verses)


@pytest.fixture
def mock_source(sample_chapter):
    """Mock do ChapterTextSource."""
    from surah_quiz.models.schemas import ChapterSummary

    mock = MagicMock()
    mock.list_chapters = AsyncMock(
        return_value=[
            ChapterSummary(number=1, name="الفاتحة", english_name="Al-Faatiha"),
            ChapterSummary(number=112, name="الإخلاص", english_name="Al-Ikhlaas"),
        ]
    )
    mock.get_verses = AsyncMock(return_value=sample_chapter)
    return mock


@pytest.fixture
def chapters_payload():
    """Payload da lista de surahs no formato do proxy."""
    return {
        "code": 200,
        "data": [
            {"number": 1, "name": "سُورَةُ ٱلْفَاتِحَةِ", "englishName": "Al-Faatiha", "numberOfAyahs": 7},
            {"number": 112, "name": "سُورَةُ الإِخۡلَاصِ", "englishName": "Al-Ikhlaas", "numberOfAyahs": 4},
        ],
    }


@pytest.fixture
def verses_payload():
    """Payload de versos no formato do proxy."""
    return {
        "code": 200,
        "data": {
            "number": 112,
            "name": "سُورَةُ الإِخۡلَاصِ",
            "ayahs": [
                {"number": 6222, "text": "A B C", "numberInSurah": 1},
                {"number": 6223, "text": "D E", "numberInSurah": 2},
            ],
        },
    }


# =============================================================================
# FIXTURES DO APP STATE
# =============================================================================


@pytest.fixture
def clean_app_state(mock_source, scripted_random):
    """Configura app_state com fonte mock e limpa apos o teste."""
    import app_state
    from surah_quiz.config import QuizConfig

    app_state.configure(QuizConfig(invocation_phrase=INVOCATION), new_source=mock_source)
    app_state.generator.random = scripted_random()
    app_state.chapters = []
    app_state.clear_session()
    yield app_state
    app_state.clear_session()
    app_state.chapters = []
    app_state._in_flight = 0
    app_state._start_token = 0
    app_state.loading = False
    app_state.source = None
    app_state.generator = None


@pytest.fixture
def client(clean_app_state):
    """Cliente de teste FastAPI."""
    from fastapi.testclient import TestClient
    from server import app

    return TestClient(app)


# =============================================================================
# FIXTURES DE LOGGING
# =============================================================================


@pytest.fixture
def capture_logs(caplog):
    """Captura logs para verificação em testes."""
    import logging

    caplog.set_level(logging.DEBUG)
    return caplog
