"""Module with natural language tokenisers."""

import unicodedata
from abc import ABC, abstractmethod
from typing_extensions import override

from nltk.tokenize import WhitespaceTokenizer

from typoscan.data_models import Word


def is_punctuation(character: str) -> bool:
    """Check whether a character belongs to a Unicode punctuation category."""
    return unicodedata.category(character).startswith("P")


def split_lines(text: str) -> list[str]:
    """
    Split a text into lines the way a line scanner reads a file.

    Lines are separated by `\\n`, a trailing `\\r` is dropped, and a final newline
    does not start an extra empty line.

    Args:
        text (str): Text to be split.

    Returns:
        list[str]: Lines of the text without line terminators.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def decode_input(data: bytes) -> str:
    """
    Decode raw input as UTF-8 keeping invalid bytes as lone surrogates.

    Args:
        data (bytes): Raw content of a file.

    Returns:
        str: Decoded text; `encode_output()` restores the original bytes.
    """
    return data.decode("utf-8", errors="surrogateescape")


def encode_output(text: str) -> bytes:
    """Encode text decoded by `decode_input()` back into the original bytes."""
    return text.encode("utf-8", errors="surrogateescape")


def _byte_length(text: str) -> int:
    return len(encode_output(text))


def _leading_html_length(text: str) -> int:
    # A tag runs from "<" to the first ">" after it.
    length = 0
    while text.startswith("<", length):
        closing = text.find(">", length)
        if closing < 0:
            break
        length = closing + 1
    return length


def _trailing_html_length(text: str) -> int:
    end = len(text)
    while end > 0 and text[end - 1] == ">":
        opening = text.rfind("<", 0, end)
        if opening < 0:
            break
        end = opening
    return len(text) - end


class Tokeniser(ABC):
    """An interface of a tokeniser extracting candidate words from a text."""

    @abstractmethod
    def tokenise_line(self, line: str, file: str, line_number: int) -> list[Word]:
        """
        Extract words from a single line.

        Args:
            line (str): A line of the text without its terminator.
            file (str): Name of the file the line comes from.
            line_number (int): 1-based number of the line in the file.

        Returns:
            list[Word]: Words in the order they appear on the line.
        """

    def tokenise(self, text: str, file: str) -> list[Word]:
        """
        Split a whole text into words.

        Args:
            text (str): A text to be split.
            file (str): Name of the file the text comes from.

        Returns:
            list[Word]: Words in the order they appear in the text.
        """
        words: list[Word] = []
        for line_number, line in enumerate(split_lines(text), start=1):
            words.extend(self.tokenise_line(line, file, line_number))
        return words


class WhitespaceWordTokeniser(Tokeniser):
    """Tokeniser splitting on whitespace and trimming punctuation and HTML tags."""

    def __init__(self, *, filter_html: bool = False) -> None:
        """
        Initialise the underlying whitespace tokeniser.

        Args:
            filter_html (bool, optional): Strip HTML tags glued to the beginning
                and the end of words. Defaults to False.
        """
        self._filter_html = filter_html
        self._splitter = WhitespaceTokenizer()

    @override
    def tokenise_line(self, line: str, file: str, line_number: int) -> list[Word]:
        words = []
        for start, end in self._splitter.span_tokenize(line):
            byte_offset = _byte_length(line[:start]) + 1
            word = self._make_word(line[start:end], file, line_number, byte_offset)
            if word is not None:
                words.append(word)
        return words

    def _trim_punctuation(self, text: str) -> tuple[str, int]:
        """Trim punctuation and return the rest with the number of bytes cut off."""
        start = 0
        while start < len(text) and is_punctuation(text[start]):
            start += 1
        end = len(text)
        while end > start and is_punctuation(text[end - 1]):
            end -= 1
        return text[start:end], _byte_length(text[:start])

    def _make_word(
        self, token: str, file: str, line_number: int, byte_offset: int
    ) -> Word | None:
        # "<" and ">" are symbols, not punctuation, so tags survive the first trim.
        text, skipped = self._trim_punctuation(token)
        byte_offset += skipped

        if self._filter_html:
            leading = _leading_html_length(text)
            byte_offset += _byte_length(text[:leading])
            text = text[leading:]
            text = text[: len(text) - _trailing_html_length(text)]
            if not text:
                return None
            text, skipped = self._trim_punctuation(text)
            byte_offset += skipped

        if not any(character.isalpha() for character in text):
            return None

        return Word(text=text, file=file, line=line_number, byte_offset=byte_offset)
