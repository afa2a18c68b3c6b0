"""
Strength analyzer:
Scores any password (generated, typed or pasted) from its own characters,
independently of the config that may have produced it.
"""

from __future__ import annotations

import math
import re
from collections import Counter
from dataclasses import dataclass


_LOWER_RE = re.compile(r"[a-z]")
_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile(r"[^a-zA-Z0-9]")

LENGTH_STEPS = (8, 12, 16, 20)
ENTROPY_STEPS = (50, 80)
MAX_SCORE = 10

# (highest score for the label, label, display color)
STRENGTH_LEVELS = (
    (3, "Weak", "red"),
    (5, "Fair", "orange"),
    (7, "Good", "yellow"),
    (9, "Strong", "green"),
)
TOP_LEVEL = ("Excellent", "emerald")

# Adversary model for the cracking-time estimate.
GUESSES_PER_SECOND = 1e10
# Keeps 2 ** bits inside float range.
MAX_ESTIMATE_BITS = 1023.0

_YEAR = 31536000
CRACK_TIME_UNITS = (
    ("centuries", _YEAR * 100),
    ("years", _YEAR),
    ("months", 2592000),
    ("days", 86400),
    ("hours", 3600),
    ("minutes", 60),
    ("seconds", 1),
)
INSTANT = "instant"


@dataclass(frozen=True)
class EntropyResult:
    bits: float
    score: int
    label: str
    color: str


def _round1(value: float) -> float:
    # Half-up, not banker's rounding.
    return math.floor(value * 10 + 0.5) / 10


def calculate_entropy(password: str) -> float:
    """
    Shannon entropy of the character frequencies, times the length.

    H = -sum(p(x) * log2(p(x))) over distinct characters; returns H * len.
    This is not keyspace entropy: "abcd" scores the same as "zq!7".
    """
    if not isinstance(password, str) or not password:
        return 0.0

    length = len(password)
    per_symbol = 0.0
    for count in Counter(password).values():
        p = count / length
        per_symbol -= p * math.log2(p)

    return per_symbol * length


def strength_label(score: int) -> tuple[str, str]:
    """Return (label, color) for a 0-10 score."""
    for ceiling, label, color in STRENGTH_LEVELS:
        if score <= ceiling:
            return label, color
    return TOP_LEVEL


def score_password(password: str, entropy_bits: float) -> int:
    length = len(password)
    score = sum(1 for step in LENGTH_STEPS if length >= step)

    for pattern in (_LOWER_RE, _UPPER_RE, _DIGIT_RE, _SYMBOL_RE):
        if pattern.search(password):
            score += 1

    score += sum(1 for step in ENTROPY_STEPS if entropy_bits >= step)
    return score


def analyze_password_strength(password: str) -> EntropyResult:
    """
    Entropy bits (one decimal), 0-10 score and strength label.

    Empty or non-string input gives bits=0, score=0, "Weak".
    """
    if not isinstance(password, str):
        password = ""

    entropy = calculate_entropy(password)
    score = score_password(password, entropy)
    label, color = strength_label(score)

    return EntropyResult(
        bits=_round1(entropy),
        score=score,
        label=label,
        color=color,
    )


def estimate_cracking_time(bits: float) -> str:
    """
    Coarse time to guess a password with `bits` of entropy at 1e10
    guesses/second, searching half the keyspace on average.

    Returns "<count> <unit>" for the largest unit with a whole count of at
    least one, or "instant".
    """
    try:
        bits = float(bits)
    except (TypeError, ValueError):
        return INSTANT
    if math.isnan(bits):
        return INSTANT
    bits = min(bits, MAX_ESTIMATE_BITS)

    seconds = 2.0 ** bits / (2 * GUESSES_PER_SECOND)

    for unit, unit_seconds in CRACK_TIME_UNITS:
        count = math.floor(seconds / unit_seconds)
        if count >= 1:
            return f"{count} {unit}"

    return INSTANT


def format_entropy(bits: float) -> str:
    return f"{_round1(bits)} bits"
