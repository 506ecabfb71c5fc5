import pytest

from typoscan.data_models import Word
from typoscan.detection.detector import TypoDetector
from typoscan.nlp.known_words import KnownWords
from typoscan.nlp.tokeniser import WhitespaceWordTokeniser


def _lines(words: list[Word]) -> list[str]:
    return [str(word) for word in words]


def test_typos_are_ranked_by_score(sample_words: list[Word]):
    detector = TypoDetector(KnownWords(), max_results=10, threshold=0)

    report = detector.detect(sample_words)

    assert _lines(report.typos) == [
        "sample.txt:1:28 [57] abx",
        "sample.txt:1:7 [37] cb",
        "sample.txt:1:4 [31] ac",
        "sample.txt:1:1 [23] ab",
    ]
    assert report.repeats == []


@pytest.mark.parametrize(
    ("max_results", "threshold", "expected"),
    [
        (2, 5, ["abx", "cb"]),
        (10, 35, ["abx", "cb"]),
        (10, 40, ["abx"]),
        (10, 100, []),
        (0, 0, []),
    ],
)
def test_limits(
    sample_words: list[Word], max_results: int, threshold: int, expected: list[str]
):
    detector = TypoDetector(KnownWords(), max_results=max_results, threshold=threshold)

    report = detector.detect(sample_words)

    assert [word.text for word in report.typos] == expected
    assert all(word.score >= threshold for word in report.typos)


def test_known_words_are_never_reported(sample_words: list[Word]):
    detector = TypoDetector(KnownWords(["abx"]), threshold=0)

    report = detector.detect(sample_words)

    assert "abx" not in [word.text for word in report.typos]
    # Known words still count towards the statistics.
    assert [word.score for word in report.typos] == [37, 31, 23]


def test_repeats_are_found_before_reordering():
    words = WhitespaceWordTokeniser().tokenise("a word Word and more\n", file="f")

    report = TypoDetector(KnownWords()).detect(words)

    assert [word.location for word in report.repeats] == ["f:1:8"]


def test_repeats_can_be_suppressed():
    words = WhitespaceWordTokeniser().tokenise("the the dog", file="f")

    report = TypoDetector(KnownWords(), report_repeats=False).detect(words)

    assert report.repeats == []


def test_identical_runs_give_identical_reports(sample_text: str):
    def run() -> list[str]:
        words = WhitespaceWordTokeniser().tokenise(sample_text * 2, file="f")
        report = TypoDetector(KnownWords(["ab"]), threshold=0).detect(words)
        return _lines(report.repeats) + _lines(report.typos)

    assert run() == run()


def test_negative_maximum_is_rejected():
    with pytest.raises(ValueError, match="max_results"):
        TypoDetector(KnownWords(), max_results=-1)
