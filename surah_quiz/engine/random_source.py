"""Random Source - Abstracao da aleatoriedade usada na geracao."""

import random
from typing import MutableSequence, Optional, Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Fonte de aleatoriedade injetavel.

    ``random.Random`` ja satisfaz este protocolo; testes passam
    implementacoes com sequencias fixas.
    """

    def randrange(self, stop: int) -> int:
        """Inteiro uniforme em [0, stop)."""
        ...

    def shuffle(self, x: MutableSequence[T]) -> None:
        """Permutacao uniforme in-place."""
        ...


def default_random_source(seed: Optional[int] = None) -> RandomSource:
    """Cria a fonte padrao (``random.Random``), opcionalmente com seed."""
    return random.Random(seed)
