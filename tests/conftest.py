"""
Shared pytest fixtures for language model tests.
"""
from pathlib import Path
from typing import List

import pytest


SAMPLE_CORPUS = (
    "Now is the time for all good men to come to the aid of their country. "
    "The quick brown fox jumps over the lazy dog. "
    "To be or not to be, that is the question. "
    "All that glitters is not gold, and all good things come to an end.\n"
)


class FixedRandom:
    """Random source stub returning a scripted sequence of draws."""

    def __init__(self, draws: List[float]):
        self.draws = list(draws)

    def random(self) -> float:
        return self.draws.pop(0)


@pytest.fixture
def sample_corpus() -> str:
    """Sample training text."""
    return SAMPLE_CORPUS


@pytest.fixture
def corpus_path(sample_corpus, tmp_path) -> Path:
    """Write the sample corpus to a temporary file."""
    file_path = tmp_path / "corpus.txt"
    file_path.write_text(sample_corpus, encoding="utf-8")
    return file_path


# Helper functions for tests


def create_temp_corpus(text: str, tmp_path: Path, filename: str = "corpus.txt", encoding: str = "utf-8") -> Path:
    """Helper to create a temporary corpus file."""
    file_path = tmp_path / filename
    with file_path.open("w", encoding=encoding, newline="") as f:
        f.write(text)
    return file_path
