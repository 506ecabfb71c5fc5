import pytest

from typoscan.nlp.tokeniser import (
    WhitespaceWordTokeniser,
    decode_input,
    encode_output,
    split_lines,
)


def _extract(line: str, *, filter_html: bool = False) -> list[tuple[str, int]]:
    tokeniser = WhitespaceWordTokeniser(filter_html=filter_html)
    return [
        (word.text, word.byte_offset)
        for word in tokeniser.tokenise_line(line, "test.txt", 1)
    ]


def test_splits_on_whitespace_and_trims_punctuation():
    assert _extract("Hello, world!") == [("Hello", 1), ("world", 8)]


def test_offset_skips_leading_whitespace_and_punctuation():
    assert _extract('  "(quoted)" text') == [("quoted", 5), ("text", 14)]


def test_offsets_are_counted_in_bytes():
    assert _extract("héllo wörld") == [("héllo", 1), ("wörld", 8)]


def test_inner_punctuation_is_kept():
    assert _extract("don't e.g. well-known") == [
        ("don't", 1),
        ("e.g", 7),
        ("well-known", 12),
    ]


def test_tokens_without_letters_are_dropped():
    assert _extract("123 --- 4.5 ... 3rd") == [("3rd", 17)]


def test_html_is_kept_without_filtering():
    assert _extract("<em>word</em>") == [("<em>word</em>", 1)]


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("<code><em>foo</em></code>,", [("foo", 11)]),
        ("<b>(hi)</b>", [("hi", 5)]),
        ("x <br> y", [("x", 1), ("y", 8)]),
        ("<p>Paragraph", [("Paragraph", 4)]),
        ("a<b", [("a<b", 1)]),
    ],
)
def test_html_filtering(line: str, expected: list[tuple[str, int]]):
    assert _extract(line, filter_html=True) == expected


def test_tokenise_numbers_lines():
    tokeniser = WhitespaceWordTokeniser()

    words = tokeniser.tokenise("one\r\ntwo three\n\nfour\n", file="doc.txt")

    assert [(word.text, word.line, word.byte_offset) for word in words] == [
        ("one", 1, 1),
        ("two", 2, 1),
        ("three", 2, 5),
        ("four", 4, 1),
    ]
    assert {word.file for word in words} == {"doc.txt"}


def test_split_lines_without_final_newline():
    assert split_lines("a\nb") == ["a", "b"]
    assert split_lines("a\n\n") == ["a", ""]
    assert split_lines("") == []


def test_word_lower_form():
    [word] = WhitespaceWordTokeniser().tokenise_line("ÉCOLE", "test.txt", 1)

    assert word.lower == "école"


def test_invalid_bytes_keep_offsets_of_the_original_line():
    text = decode_input(b"caf\xe9 word\n")

    words = WhitespaceWordTokeniser().tokenise(text, file="test.txt")

    assert [word.byte_offset for word in words] == [1, 6]
    assert encode_output(words[0].text) == b"caf\xe9"


def test_bare_carriage_return_does_not_end_a_line():
    words = WhitespaceWordTokeniser().tokenise(
        decode_input(b"alpha\rbeta gamma\n"), file="test.txt"
    )

    assert [(word.text, word.line, word.byte_offset) for word in words] == [
        ("alpha", 1, 1),
        ("beta", 1, 7),
        ("gamma", 1, 12),
    ]
