"""
Fixed-order character-level Markov language model.

Training maps every window of `window_length` characters in the corpus to the
distribution of characters observed right after it. Generation extends a seed
text one character at a time by inverse-CDF sampling from the distribution of
the current trailing window.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Union

from charlm.services.corpus import read_chars
from charlm.utils.logger import log_debug, log_info, log_warning


class InvalidStateError(RuntimeError):
    """Raised when a model or distribution is used outside its lifecycle."""


@dataclass
class CharData:
    """A character seen after some context, with its count and probabilities."""
    char: str
    count: int = 1
    p: float = 0.0
    cp: float = 0.0

    def __str__(self) -> str:
        return f"({self.char} {self.count} {self.p} {self.cp})"


class FollowDistribution:
    """
    Characters observed after one context, in first-seen order.

    Each character appears at most once. Probabilities are only meaningful
    after `calculate_probabilities` has run.
    """

    def __init__(self):
        self._entries: Dict[str, CharData] = {}
        self.finalized = False

    def update(self, char: str) -> None:
        """Increment the count of `char`, appending a new entry on first sight."""
        entry = self._entries.get(char)
        if entry is None:
            self._entries[char] = CharData(char)
        else:
            entry.count += 1

    def get(self, char: str) -> Optional[CharData]:
        return self._entries.get(char)

    def total_count(self) -> int:
        return sum(entry.count for entry in self._entries.values())

    def __contains__(self, char: object) -> bool:
        return char in self._entries

    def __iter__(self) -> Iterator[CharData]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        return "(" + " ".join(str(entry) for entry in self) + ")"


@dataclass
class ModelStats:
    """Summary of a trained model."""
    window_length: int = 0
    contexts: int = 0
    transitions: int = 0
    alphabet_size: int = 0


def calculate_probabilities(distribution: FollowDistribution) -> None:
    """
    Set p and cp on every entry of the distribution.

    p is count / total; cp is the running sum of p in entry order, so the
    last entry ends at 1.0 up to floating-point error.
    """
    total = distribution.total_count()
    if total == 0:
        raise InvalidStateError("cannot normalize an empty distribution")

    cumulative = 0.0
    for entry in distribution:
        entry.p = entry.count / total
        cumulative += entry.p
        entry.cp = cumulative
    distribution.finalized = True


def sample_char(distribution: FollowDistribution, rng: random.Random) -> str:
    """Draw a character from a finalized distribution by inverse-CDF sampling."""
    if len(distribution) == 0:
        raise InvalidStateError("cannot sample from an empty distribution")
    if not distribution.finalized:
        raise InvalidStateError("distribution has not been finalized")

    r = rng.random()
    entry = None
    for entry in distribution:
        if entry.cp >= r:
            return entry.char
    # r landed above the last cp because of rounding
    return entry.char


def _single_chars(chars: Iterable[str]) -> Iterator[str]:
    for char in chars:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"training stream must yield single characters, got {char!r}")
        yield char


class LanguageModel:
    """
    Character-level Markov model with a fixed window length.

    The model owns its context map and its random source. Passing a seed
    makes generation reproducible; without one every run differs.
    """

    def __init__(self, window_length: int, seed: Optional[int] = None):
        """
        Initialize an empty model.

        Args:
            window_length: Number of preceding characters used as context
            seed: Seed for the random source (None = non-deterministic)
        """
        if window_length < 1:
            raise ValueError("window_length must be at least 1")

        self.window_length = window_length
        self.seed = seed
        self.random_generator = random.Random(seed)
        self.char_data_map: Dict[str, FollowDistribution] = {}
        self.trained = False

    def train(self, chars: Iterable[str]) -> "LanguageModel":
        """
        Build the context map from a stream of single characters.

        A stream shorter than window_length + 1 leaves the map empty. Items
        that are not exactly one character (lines, words) raise ValueError.
        If the stream fails partway through, the model is left untouched and
        can be trained again.
        """
        if self.trained:
            raise InvalidStateError("model has already been trained")

        char_data_map: Dict[str, FollowDistribution] = {}
        stream = _single_chars(chars)
        window = "".join(islice(stream, self.window_length))

        if len(window) == self.window_length:
            for char in stream:
                probs = char_data_map.get(window)
                if probs is None:
                    probs = FollowDistribution()
                    char_data_map[window] = probs
                probs.update(char)
                window = window[1:] + char

        if not char_data_map:
            log_warning("Corpus too short, no contexts learned", window_length=self.window_length)

        for probs in char_data_map.values():
            calculate_probabilities(probs)
        self.char_data_map = char_data_map
        self.trained = True

        stats = self.get_stats()
        log_info(
            "Language model trained",
            window_length=self.window_length,
            contexts=stats.contexts,
            transitions=stats.transitions,
        )
        return self

    def train_file(self, path: Union[str, Path], encoding: Optional[str] = None) -> "LanguageModel":
        """Train from a corpus file read character by character."""
        return self.train(read_chars(path, encoding=encoding))

    def get_random_char(self, probs: FollowDistribution) -> str:
        """Sample a character using this model's random source."""
        return sample_char(probs, self.random_generator)

    def generate(self, initial_text: str, text_length: int) -> str:
        """
        Generate text starting from initial_text.

        Args:
            initial_text: Text to start with; kept verbatim at the front
            text_length: Total length of the returned text

        Returns:
            The generated text. It is initial_text unchanged when that is
            shorter than the window, and stops early when the trailing window
            was never seen in training.
        """
        if text_length < 0:
            raise ValueError("text_length must be non-negative")
        if len(initial_text) < self.window_length:
            return initial_text

        generated = list(initial_text)
        while len(generated) < text_length:
            window = "".join(generated[-self.window_length:])
            probs = self.char_data_map.get(window)
            if probs is None:
                log_debug("Generation stopped on unseen context", window=repr(window), length=len(generated))
                break
            generated.append(self.get_random_char(probs))

        return "".join(generated)

    def get_stats(self) -> ModelStats:
        alphabet = set()
        transitions = 0
        for window, probs in self.char_data_map.items():
            alphabet.update(window)
            for entry in probs:
                alphabet.add(entry.char)
                transitions += entry.count

        return ModelStats(
            window_length=self.window_length,
            contexts=len(self.char_data_map),
            transitions=transitions,
            alphabet_size=len(alphabet),
        )

    def __str__(self) -> str:
        return "".join(f"{key} : {probs}\n" for key, probs in self.char_data_map.items())


def train_from_text(text: str, window_length: int, seed: Optional[int] = None) -> LanguageModel:
    model = LanguageModel(window_length, seed=seed)
    model.train(text)
    return model
