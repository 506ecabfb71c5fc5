"""Module with the typo detector running all phases of the analysis."""

from loguru import logger

from typoscan.configuration import config
from typoscan.data_models import Report, Word
from typoscan.detection.frequency import FrequencyModel
from typoscan.detection.peculiarity import PeculiarityScorer
from typoscan.detection.report import deduplicate, find_repeats, rank, select
from typoscan.nlp.known_words import KnownWords


class TypoDetector:
    """Detector of typos based on letter-sequence statistics of the corpus itself."""

    def __init__(
        self,
        known_words: KnownWords,
        *,
        report_repeats: bool = not config.suppress_repeats,
        max_results: int = config.max_results,
        threshold: int = config.threshold,
    ) -> None:
        """
        Configure the detector.

        Args:
            known_words (KnownWords): Common words that are never reported.
            report_repeats (bool, optional): Look for immediately repeated words.
                Defaults to the value from the configuration.
            max_results (int, optional): The maximum number of reported typos.
                Defaults to the value from the configuration.
            threshold (int, optional): The lowest score of a reported typo.
                Defaults to the value from the configuration.

        Raises:
            ValueError: Raised if `max_results` is negative.
        """
        if max_results < 0:
            raise ValueError("`max_results` must be >= 0.")
        self._known_words = known_words
        self._report_repeats = report_repeats
        self._max_results = max_results
        self._threshold = threshold

    def detect(self, words: list[Word]) -> Report:
        """
        Find repeated words and the most peculiar words of a corpus.

        Scores are set on the given words and the list is reordered in place.

        Args:
            words (list[Word]): All words of the corpus in their original order.

        Returns:
            Report: Repeated words in corpus order and typos by descending score.
        """
        repeats = find_repeats(words) if self._report_repeats else []

        model = FrequencyModel()
        model.add_words(words)
        tables = model.freeze()

        scorer = PeculiarityScorer(tables, self._known_words)
        scorer.score_words(words)

        candidates = deduplicate(words, self._known_words)
        rank(candidates)
        typos = select(candidates, self._max_results, self._threshold)
        logger.debug(
            f"Scored {len(words)} words, {len(candidates)} distinct unknown ones, "
            f"{len(typos)} reported."
        )
        return Report(repeats=repeats, typos=typos)
