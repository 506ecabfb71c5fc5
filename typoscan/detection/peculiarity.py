"""Module with the index of peculiarity of words.

The method comes from R. Morris and L. L. Cherry, "Computer detection of
typographical errors", Bell Labs CSTR 18, 1974. Each trigram T = (xyz) of a word
is judged against the digram and trigram counts of the whole document, with
every count reduced by one to remove the effect of the word itself:

    i(T) = (1/2)[log n(xy) + log n(yz)] - log n(xyz)

The indices of a word are combined by the square root of the average of their
squares.
"""

import math
from collections.abc import Iterable

from typoscan.data_models import Trigram, Word
from typoscan.detection.frequency import FrequencyTables, trigrams
from typoscan.nlp.known_words import KnownWords


class PeculiarityScorer:
    """Scorer assigning each word an integer index of peculiarity."""

    def __init__(self, tables: FrequencyTables, known_words: KnownWords) -> None:
        """
        Initialise the scorer with complete corpus statistics.

        Args:
            tables (FrequencyTables): Frozen counts of the whole corpus.
            known_words (KnownWords): Words that are never scored.
        """
        self._tables = tables
        self._known_words = known_words

    def trigram_index(self, trigram: Trigram) -> float:
        """
        Compute the index of a single trigram of a counted word.

        Args:
            trigram (Trigram): A trigram of a word that contributed to the tables.

        Returns:
            float: The index; 0.0 if any leave-one-out count is zero.
        """
        x, y, z = trigram
        nxy = self._tables.digram_count((x, y)) - 1
        nyz = self._tables.digram_count((y, z)) - 1
        nxyz = self._tables.trigram_count(trigram) - 1
        # The paper takes log(0) as -10, but its square of 100 swamps the sum.
        if nxy <= 0 or nyz <= 0 or nxyz <= 0:
            return 0.0
        return 0.5 * (math.log(nxy) + math.log(nyz)) - math.log(nxyz)

    def score(self, text: str) -> int:
        """
        Compute the index of peculiarity of a word.

        Args:
            text (str): The word as it appears in the corpus.

        Returns:
            int: 10 divided by the root mean square of trigram indices, truncated.
                A word without any non-zero trigram index scores 0.
        """
        indices = [self.trigram_index(trigram) for trigram in trigrams(text)]
        sum_of_squares = sum(index * index for index in indices)
        if sum_of_squares == 0:
            return 0
        return int(10 / math.sqrt(sum_of_squares / len(indices)))

    def score_words(self, words: Iterable[Word]) -> None:
        """
        Set scores of all words that are not known.

        Args:
            words (Iterable[Word]): Words of the corpus. Known words keep score 0.
        """
        for word in words:
            if word.text in self._known_words:
                continue
            word.score = self.score(word.text)
