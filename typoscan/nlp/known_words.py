"""Package with a stoplist of known words."""

from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from typoscan.nlp.tokeniser import decode_input


def find_known_words_file(name: Path, search_paths: Iterable[Path]) -> Path | None:
    """
    Locate a stoplist file.

    Args:
        name (Path): File name, or an absolute path used as it is.
        search_paths (Iterable[Path]): Directories searched in order.

    Returns:
        Path | None: The first existing candidate or None if there is none.
    """
    if name.is_absolute():
        return name if name.exists() else None
    for directory in search_paths:
        candidate = directory / name
        if candidate.exists():
            return candidate
    return None


class KnownWords:
    """Set of common words that are never reported as typos."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        """Initialise with the given words."""
        self._words = frozenset(words)

    @classmethod
    def from_files(cls, files: Iterable[Path]) -> "KnownWords":
        """
        Load whitespace-delimited words from stoplist files.

        A file that cannot be read is reported and contributes no words.

        Args:
            files (Iterable[Path]): Stoplist files to be read.

        Returns:
            KnownWords: Union of the words from all readable files.
        """
        words: set[str] = set()
        for path in files:
            try:
                text = decode_input(path.read_bytes())
            except OSError as error:
                logger.warning(f"Cannot read known words file {path}: {error}")
                continue
            loaded = text.split()
            logger.debug(f"Loaded {len(loaded)} known words from {path}.")
            words.update(loaded)
        return cls(words)

    @classmethod
    def from_search_paths(
        cls,
        names: Iterable[Path],
        search_paths: Iterable[Path],
        extra_files: Iterable[Path] = (),
    ) -> "KnownWords":
        """
        Look stoplists up by name and load them along with explicitly given files.

        Args:
            names (Iterable[Path]): Stoplist file names to be searched for.
            search_paths (Iterable[Path]): Directories searched in order.
            extra_files (Iterable[Path], optional): Stoplist files given directly.

        Returns:
            KnownWords: Union of the words from all found and readable files.
        """
        search_paths = list(search_paths)
        files = []
        for name in names:
            path = find_known_words_file(name, search_paths)
            if path is None:
                logger.warning(f"Cannot find known words file {str(name)!r}.")
                continue
            files.append(path)
        files.extend(extra_files)
        return cls.from_files(files)

    def __contains__(self, word: object) -> bool:
        """Check the word as written first, then its lower-cased form."""
        if not isinstance(word, str):
            return False
        return word in self._words or word.lower() in self._words

    def __len__(self) -> int:
        """Get a number of known words."""
        return len(self._words)
