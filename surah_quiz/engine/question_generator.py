"""Question Generator - Motor de geracao de perguntas de lacuna."""

import logging
from typing import Optional, Sequence

from ..config import BASMALA, DEFAULT_MAX_CHOICES
from ..exceptions import InvalidInputError
from ..models.schemas import Question, Verse
from .random_source import RandomSource, default_random_source
from .vocabulary import Vocabulary, tokenize

logger = logging.getLogger(__name__)


def strip_invocation(text: str, phrase: str = BASMALA) -> str:
    """Remove a frase de invocacao do inicio do texto.

    So remove quando a frase termina em espaco e ha conteudo depois dela;
    um verso que e apenas a invocacao (ou que emenda a frase numa palavra
    maior) fica intacto.

    Args:
        text: Texto do verso
        phrase: Frase de invocacao

    Returns:
        Texto sem a invocacao (ou o texto original)
    """
    if not phrase or not text.startswith(phrase):
        return text

    tail = text[len(phrase):]
    if tail and not tail[0].isspace():
        return text

    rest = tail.lstrip()
    return rest if rest else text


class QuestionGenerator:
    """Gera uma pergunta de lacuna por verso.

    Para cada verso, esconde uma palavra escolhida ao acaso e monta ate
    ``max_choices`` alternativas: a palavra correta mais distratores
    sorteados sem reposicao do vocabulario da surah.

    Example:
        >>> generator = QuestionGenerator(random.Random(7))
        >>> verses = [Verse(text="A B C", number_in_chapter=1)]
        >>> questions = generator.generate(verses)
        >>> len(questions)
        1
    """

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        max_choices: int = DEFAULT_MAX_CHOICES,
        invocation_phrase: str = BASMALA,
    ):
        """Inicializa gerador.

        Args:
            random_source: Fonte de aleatoriedade (default: random.Random())
            max_choices: Maximo de alternativas por pergunta
            invocation_phrase: Frase removida do primeiro verso
        """
        if max_choices < 1:
            raise ValueError("max_choices deve ser >= 1")

        self.random = random_source or default_random_source()
        self.max_choices = max_choices
        self.invocation_phrase = invocation_phrase

    def prepare(self, verses: Sequence[Verse]) -> list[Verse]:
        """Valida os versos e aplica a regra da invocacao no primeiro.

        Raises:
            InvalidInputError: Lista vazia ou verso sem palavras
        """
        if not verses:
            raise InvalidInputError("Lista de versos vazia")

        for position, verse in enumerate(verses):
            if not tokenize(verse.text):
                raise InvalidInputError(
                    "Verso sem palavras",
                    details={
                        "position": position,
                        "number_in_chapter": verse.number_in_chapter,
                    },
                )

        first = verses[0]
        stripped = strip_invocation(first.text, self.invocation_phrase)
        if stripped == first.text:
            return list(verses)

        logger.debug(f"Invocacao removida do verso {first.number_in_chapter}")
        return [first.model_copy(update={"text": stripped}), *verses[1:]]

    def build_vocabulary(self, verses: Sequence[Verse]) -> Vocabulary:
        """Calcula o vocabulario da surah (uma vez por selecao)."""
        return Vocabulary.from_verses(self.prepare(verses))

    def generate(
        self, verses: Sequence[Verse], vocabulary: Optional[Vocabulary] = None
    ) -> list[Question]:
        """Gera as perguntas, uma por verso, na ordem dos versos.

        Args:
            verses: Versos da surah, em ordem
            vocabulary: Vocabulario pre-calculado (build_vocabulary);
                calculado aqui se omitido

        Returns:
            Lista de Question

        Raises:
            InvalidInputError: Lista vazia ou verso sem palavras
        """
        prepared = self.prepare(verses)
        if vocabulary is None:
            vocabulary = Vocabulary.from_verses(prepared)

        questions = [self._build_question(verse, vocabulary) for verse in prepared]
        logger.debug(
            f"{len(questions)} perguntas geradas (vocabulario: {len(vocabulary)} palavras)"
        )
        return questions

    def _build_question(self, verse: Verse, vocabulary: Vocabulary) -> Question:
        words = tokenize(verse.text)
        hidden_index = self.random.randrange(len(words))
        correct_word = words[hidden_index]

        choices = [correct_word]
        pool = vocabulary.without(correct_word)

        while len(choices) < self.max_choices and pool:
            wrong_word = pool.pop(self.random.randrange(len(pool)))
            if wrong_word not in choices:
                choices.append(wrong_word)

        self.random.shuffle(choices)

        return Question(
            verse_text=verse.text,
            verse_number=verse.number_in_chapter,
            hidden_word_index=hidden_index,
            correct_word=correct_word,
            choices=choices,
        )
