"""
Charset builder: turn a PasswordConfig into the ordered list of enabled
character classes and their combined alphabet.
"""

from __future__ import annotations

import logging
import math
import string
from dataclasses import dataclass
from typing import List

from .config import PasswordConfig

logger = logging.getLogger(__name__)


UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
NUMBERS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

AMBIGUOUS_CHARS = frozenset("Il1O0o")

# Fallback when the caller enabled nothing.
FALLBACK_CLASS = "lowercase"


@dataclass(frozen=True)
class CharacterClass:
    # One of "uppercase", "lowercase", "numbers", "symbols".
    name: str
    # Effective characters after ambiguity filtering.
    characters: str


def filter_ambiguous(chars: str) -> str:
    return "".join(ch for ch in chars if ch not in AMBIGUOUS_CHARS)


def build_enabled_classes(config: PasswordConfig) -> List[CharacterClass]:
    """
    Return the enabled classes in fixed order (uppercase, lowercase,
    numbers, symbols), ambiguity-filtered where requested.

    Never returns an empty list: with no class enabled the lowercase class
    is used on its own.
    """
    def letters_or_digits(chars: str) -> str:
        return filter_ambiguous(chars) if config.avoid_ambiguous else chars

    classes: List[CharacterClass] = []
    if config.uppercase:
        classes.append(CharacterClass("uppercase", letters_or_digits(UPPERCASE)))
    if config.lowercase:
        classes.append(CharacterClass("lowercase", letters_or_digits(LOWERCASE)))
    if config.numbers:
        classes.append(CharacterClass("numbers", letters_or_digits(NUMBERS)))
    if config.symbols:
        # Symbols are never ambiguity-filtered.
        classes.append(CharacterClass("symbols", SYMBOLS))

    classes = [c for c in classes if c.characters]

    if not classes:
        logger.warning(
            "No character class enabled; falling back to %s.", FALLBACK_CLASS
        )
        classes = [CharacterClass(FALLBACK_CLASS, LOWERCASE)]

    return classes


def combined_alphabet(classes: List[CharacterClass]) -> str:
    return "".join(c.characters for c in classes)


def charset_size(config: PasswordConfig) -> int:
    """Number of characters the generator can draw from for `config`."""
    return len(combined_alphabet(build_enabled_classes(config)))


def max_entropy_bits(config: PasswordConfig) -> float:
    """
    Theoretical keyspace entropy: length * log2(alphabet size).

    This is the figure a uniformly random password of this config carries,
    unlike the frequency-based estimate in `spgen.entropy`.
    """
    if config.length <= 0:
        return 0.0
    return config.length * math.log2(charset_size(config))
