"""Module with ranking and reporting of suspicious words."""

from typoscan.data_models import Word
from typoscan.nlp.known_words import KnownWords


def find_repeats(words: list[Word]) -> list[Word]:
    """
    Find words repeating the word right before them, ignoring the case.

    Args:
        words (list[Word]): Words in the order they appear in the corpus.

    Returns:
        list[Word]: Second occurrences of the repeated words in corpus order.
    """
    repeats = []
    previous = ""
    for word in words:
        if word.lower == previous:
            repeats.append(word)
        previous = word.lower
    return repeats


def deduplicate(words: list[Word], known_words: KnownWords) -> list[Word]:
    """
    Keep each distinct word once and drop the known ones.

    The list is sorted in place by text; the first word of each run of equal texts
    is kept.

    Args:
        words (list[Word]): Words of the corpus.
        known_words (KnownWords): Words never reported.

    Returns:
        list[Word]: Distinct unknown words in lexicographic order.
    """
    words.sort(key=lambda word: word.text)
    unique = []
    previous = None
    for word in words:
        if word.text == previous:
            continue
        if word.lower in known_words:
            continue
        unique.append(word)
        previous = word.text
    return unique


def rank(words: list[Word]) -> None:
    """Sort words in place from the most to the least peculiar one."""
    words.sort(key=lambda word: word.score, reverse=True)


def select(words: list[Word], max_results: int, threshold: int) -> list[Word]:
    """
    Take the top of a ranked list.

    Args:
        words (list[Word]): Words sorted by descending score.
        max_results (int): The maximum number of words to be taken.
        threshold (int): The lowest score worth reporting.

    Returns:
        list[Word]: At most `max_results` leading words scoring at least
            `threshold`.
    """
    selected = []
    for word in words[:max_results]:
        if word.score < threshold:
            break
        selected.append(word)
    return selected
