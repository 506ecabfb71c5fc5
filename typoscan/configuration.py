"""The configuration module."""

import tomllib
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

PACKAGE_DATA_DIRECTORY = Path(__file__).parent / "data"

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR"]


class Configuration(BaseModel):
    """Configuration of the application."""

    project_name: str = "typoscan"

    max_results: int = Field(50, ge=0)
    threshold: int = 10
    suppress_repeats: bool = False
    filter_html: bool = False

    # File names are looked up in the search paths in order, the first hit wins.
    known_words_files: list[Path] = [Path("words")]
    known_words_search_paths: list[Path] = [Path("./data"), PACKAGE_DATA_DIRECTORY]

    log_level: LogLevel = "WARNING"


def load_configuration(
    configuration_file: Path = Path("config.toml"),
) -> Configuration:
    """
    Load configuration from the configuration file.

    Args:
        configuration_file (Path, optional): Path to a TOML file with settings.
            Defaults to `config.toml` in the working directory.

    Returns:
        Configuration: Settings from the file, or the defaults if the file does
            not exist.
    """
    if not configuration_file.exists():
        return Configuration()
    with configuration_file.open("rb") as f:
        settings = tomllib.load(f)
    return Configuration(**settings)


config = load_configuration()
