"""Shared fixtures."""

from collections.abc import Iterator

import pytest
from loguru import logger

from typoscan.data_models import Word
from typoscan.nlp.tokeniser import WhitespaceWordTokeniser

# "abx" is the only word with letter sequences seen nowhere else.
SAMPLE_TEXT = "ab ac cb ab ac cb ab ac cb abx\n"


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT


@pytest.fixture
def sample_words(sample_text: str) -> list[Word]:
    return WhitespaceWordTokeniser().tokenise(sample_text, file="sample.txt")
