"""Module with project-wide data models."""

from functools import cached_property
from typing import Final

from pydantic import BaseModel, Field, computed_field

# Marks the start and the end of a word. A real character is never empty.
BOUNDARY: Final = ""

Digram = tuple[str, str]
Trigram = tuple[str, str, str]


class Word(BaseModel):
    """A single token extracted from the input together with its location."""

    text: str = Field(..., min_length=1)
    file: str
    line: int = Field(..., ge=1)
    byte_offset: int = Field(..., ge=1)
    score: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @cached_property
    def lower(self) -> str:
        """Lower-cased form used for known-word lookups and repeat detection."""
        return self.text.lower()

    @property
    def location(self) -> str:
        """
        Get the location of the word in the `file:line:byte` form.

        Returns:
            str: Location of the first byte of the word.
        """
        return f"{self.file}:{self.line}:{self.byte_offset}"

    def __str__(self) -> str:
        """
        Convert the word into a report line.

        Returns:
            str: Location and text, with the score in brackets once it is set.
        """
        if self.score == 0:
            return f"{self.location} {self.text}"
        return f"{self.location} [{self.score}] {self.text}"


class Report(BaseModel):
    """Outcome of a single detection run."""

    repeats: list[Word] = []
    typos: list[Word] = []
