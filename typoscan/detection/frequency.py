"""Module with digram and trigram statistics of a corpus."""

from collections import Counter
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from loguru import logger

from typoscan.data_models import BOUNDARY, Digram, Trigram, Word


def digrams(text: str) -> Iterator[Digram]:
    """
    Generate digrams of a word including both boundary digrams.

    For "once" these are ".o", "on", "nc", "ce" and "e.", where "." stands for
    the boundary.

    Args:
        text (str): The word.

    Yields:
        Digram: len(text) + 1 digrams in order.
    """
    previous = BOUNDARY
    for character in text:
        yield (previous, character)
        previous = character
    yield (previous, BOUNDARY)


def trigrams(text: str) -> Iterator[Trigram]:
    """
    Generate trigrams of a word including the initial and the terminal trigram.

    For "once" these are "..o", ".on", "onc", "nce" and "ce.", so every character
    of the word and the final transition are represented. For a single letter
    "a" these are "..a" and ".a.".

    Args:
        text (str): The word.

    Yields:
        Trigram: len(text) + 1 trigrams in order.
    """
    first, second = BOUNDARY, BOUNDARY
    for character in text:
        yield (first, second, character)
        first, second = second, character
    yield (first, second, BOUNDARY)


class FrequencyTables:
    """Read-only digram and trigram counts of a whole corpus."""

    def __init__(
        self, digram_counts: Mapping[Digram, int], trigram_counts: Mapping[Trigram, int]
    ) -> None:
        """Wrap the counts in read-only views."""
        self._digram_counts = MappingProxyType(dict(digram_counts))
        self._trigram_counts = MappingProxyType(dict(trigram_counts))

    @property
    def digram_counts(self) -> Mapping[Digram, int]:
        """Mapping of digrams to the number of their occurrences."""
        return self._digram_counts

    @property
    def trigram_counts(self) -> Mapping[Trigram, int]:
        """Mapping of trigrams to the number of their occurrences."""
        return self._trigram_counts

    def digram_count(self, digram: Digram) -> int:
        """Get a number of occurrences of a digram, 0 for unseen ones."""
        return self._digram_counts.get(digram, 0)

    def trigram_count(self, trigram: Trigram) -> int:
        """Get a number of occurrences of a trigram, 0 for unseen ones."""
        return self._trigram_counts.get(trigram, 0)


class FrequencyModel:
    """Accumulator of digram and trigram counts over every word of a corpus."""

    def __init__(self) -> None:
        """Start with empty counts."""
        self._digram_counts: Counter[Digram] = Counter()
        self._trigram_counts: Counter[Trigram] = Counter()
        self._frozen = False

    def add_word(self, text: str) -> None:
        """
        Count digrams and trigrams of a single word.

        The original text is used since the case of letters matters.

        Args:
            text (str): The word as it appears in the corpus.

        Raises:
            RuntimeError: Raised if the tables have been frozen already.
        """
        if self._frozen:
            raise RuntimeError(
                "Cannot add words after the frequency tables have been frozen."
            )
        self._digram_counts.update(digrams(text))
        self._trigram_counts.update(trigrams(text))

    def add_words(self, words: Iterable[Word]) -> None:
        """
        Count digrams and trigrams of all words, duplicates and known words too.

        Args:
            words (Iterable[Word]): Words of the corpus.
        """
        for word in words:
            self.add_word(word.text)

    def freeze(self) -> FrequencyTables:
        """
        Finish accumulation and get the complete tables.

        Returns:
            FrequencyTables: Read-only counts for scoring.
        """
        self._frozen = True
        logger.debug(
            f"Frequency tables hold {len(self._digram_counts)} distinct digrams and "
            f"{len(self._trigram_counts)} distinct trigrams."
        )
        return FrequencyTables(self._digram_counts, self._trigram_counts)
