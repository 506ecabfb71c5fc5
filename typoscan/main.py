"""Entry point to the application as a Typer CLI."""

import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from typer import Typer

from typoscan.configuration import config
from typoscan.data_models import Word
from typoscan.detection.detector import TypoDetector
from typoscan.nlp.known_words import KnownWords
from typoscan.nlp.tokeniser import (
    WhitespaceWordTokeniser,
    decode_input,
    encode_output,
)

STDIN_NAME = "<stdin>"

app = Typer(
    help=(
        "Find likely typos: words whose letter sequences are unusual for the text "
        "they appear in. Repeated words are reported as well."
    ),
)


def read_words(files: list[Path], tokeniser: WhitespaceWordTokeniser) -> list[Word]:
    """
    Read and tokenise all input files, or the standard input if there are none.

    Args:
        files (list[Path]): Input files in the order they should be read.
        tokeniser (WhitespaceWordTokeniser): Tokeniser used for every input.

    Returns:
        list[Word]: Words of all inputs in order.

    Raises:
        OSError: Raised if an input file cannot be read.
    """
    if not files:
        stdin = typer.get_binary_stream("stdin")
        return tokeniser.tokenise(decode_input(stdin.read()), file=STDIN_NAME)

    words: list[Word] = []
    for path in files:
        text = decode_input(path.read_bytes())
        words.extend(tokeniser.tokenise(text, file=str(path)))
    return words


@app.command()
def scan(
    files: Annotated[
        list[Path] | None,
        typer.Argument(help="Files to be checked. Standard input if none is given."),
    ] = None,
    max_results: Annotated[
        int,
        typer.Option("-n", "--max-results", min=0, help="Maximum number of words."),
    ] = config.max_results,
    suppress_repeats: Annotated[
        bool,
        typer.Option("-r", "--suppress-repeats", help="Don't report repeated words."),
    ] = config.suppress_repeats,
    threshold: Annotated[
        int,
        typer.Option(
            "-t", "--threshold", help="Cutoff score; smaller means more words."
        ),
    ] = config.threshold,
    filter_html: Annotated[
        bool,
        typer.Option("--html", "--filter-html", help="Filter HTML tags from input."),
    ] = config.filter_html,
    known_words_files: Annotated[
        list[Path] | None,
        typer.Option("-k", "--known-words", help="Additional known words file."),
    ] = None,
) -> None:
    """Report repeated words and the most peculiar words of the input."""
    known_words = KnownWords.from_search_paths(
        config.known_words_files,
        config.known_words_search_paths,
        extra_files=known_words_files or [],
    )
    tokeniser = WhitespaceWordTokeniser(filter_html=filter_html)
    try:
        words = read_words(files or [], tokeniser)
    except OSError as error:
        logger.error(f"Cannot read {error.filename}: {error.strerror or error}")
        raise typer.Exit(code=2) from error

    detector = TypoDetector(
        known_words,
        report_repeats=not suppress_repeats,
        max_results=max_results,
        threshold=threshold,
    )
    report = detector.detect(words)

    for word in report.repeats:
        typer.echo(encode_output(f"{word.location} {word.text} repeats"))
    for word in report.typos:
        typer.echo(encode_output(str(word)))


def configure_logging(level: str = config.log_level) -> None:
    """Send log messages of the given level and above to the standard error."""
    logger.remove()
    logger.add(sys.stderr, level=level)


def run() -> None:
    """Run the CLI with logging configured."""
    configure_logging()
    app()


if __name__ == "__main__":
    run()
