"""Vocabulary - Conjunto de palavras distintas de uma surah."""

from dataclasses import dataclass
from typing import Iterable, Iterator

from ..models.schemas import Verse


def tokenize(text: str) -> list[str]:
    """Divide o texto em palavras por sequencias de espaco em branco."""
    return text.split()


@dataclass(frozen=True)
class Vocabulary:
    """Palavras distintas de uma surah, na ordem da primeira ocorrencia.

    Comparacao por igualdade exata de string (sensivel a diacriticos).

    Example:
        >>> vocab = Vocabulary.from_texts(["A B", "B C"])
        >>> vocab.words
        ('A', 'B', 'C')
    """

    words: tuple[str, ...]

    @classmethod
    def from_texts(cls, texts: Iterable[str]) -> "Vocabulary":
        seen: dict[str, None] = {}
        for text in texts:
            for word in tokenize(text):
                seen.setdefault(word, None)
        return cls(words=tuple(seen))

    @classmethod
    def from_verses(cls, verses: Iterable[Verse]) -> "Vocabulary":
        return cls.from_texts(v.text for v in verses)

    def without(self, word: str) -> list[str]:
        """Pool de distratores: vocabulario menos a palavra correta."""
        return [w for w in self.words if w != word]

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __len__(self) -> int:
        return len(self.words)
