"""
High-level generator: build the alphabet, seed required classes, fill the
remaining slots under the structural constraints, then shuffle.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence

from .config import PasswordConfig, DEFAULT_CONFIG
from .charsets import build_enabled_classes, combined_alphabet
from .random_source import secure_choice, secure_random_int, secure_shuffle

logger = logging.getLogger(__name__)

# Rejections tolerated for a single slot before the candidate is accepted.
MAX_REJECTIONS_PER_SLOT = 5000

# Re-shuffles tried when the shuffled result breaks a constraint, bounded
# by a total number of swap draws for long passwords.
MAX_SHUFFLE_ATTEMPTS = 100
SHUFFLE_DRAW_BUDGET = 200_000

# Rounds of swap repair applied to the last shuffle before giving up.
MAX_REPAIR_ROUNDS = 10


@dataclass
class GenerationMeta:
    """
    Full result of one password generation.
    """
    # Final password
    password: str

    # Enabled classes (after fallback) and the size of their union
    classes: list[str]
    alphabet_size: int

    # Slots where the rejection cap was hit and a constraint was relaxed
    relaxed_slots: int
    # Shuffles performed, 1 when the first arrangement was acceptable
    shuffle_attempts: int

    # length * log2(alphabet_size)
    max_entropy_bits: float
    config: PasswordConfig


def is_sequential(a: str, b: str, c: str) -> bool:
    """True when a, b, c are consecutive code points, up or down."""
    ca, cb, cc = ord(a), ord(b), ord(c)
    ascending = cb == ca + 1 and cc == cb + 1
    descending = cb == ca - 1 and cc == cb - 1
    return ascending or descending


def _breaks_constraints(
    previous: Sequence[str],
    candidate: str,
    no_repeat: bool,
    no_sequential: bool,
) -> bool:
    if no_repeat and previous and candidate == previous[-1]:
        return True
    if no_sequential and len(previous) > 1:
        if is_sequential(previous[-2], previous[-1], candidate):
            return True
    return False


def _arrangement_ok(chars: Sequence[str], no_repeat: bool, no_sequential: bool) -> bool:
    for i in range(1, len(chars)):
        if _breaks_constraints(chars[max(0, i - 2):i], chars[i], no_repeat, no_sequential):
            return False
    return True


def _fill(
    result: List[str],
    alphabet: str,
    target_length: int,
    no_repeat: bool,
    no_sequential: bool,
) -> int:
    """
    Append characters from `alphabet` until `result` reaches
    `target_length`. Returns how many slots had their constraint relaxed.
    """
    relaxed = 0
    while len(result) < target_length:
        rejections = 0
        candidate = secure_choice(alphabet)
        while _breaks_constraints(result, candidate, no_repeat, no_sequential):
            if rejections >= MAX_REJECTIONS_PER_SLOT:
                relaxed += 1
                logger.debug(
                    "Constraint relaxed at position %d after %d rejections.",
                    len(result),
                    rejections,
                )
                break
            rejections += 1
            candidate = secure_choice(alphabet)
        result.append(candidate)
    return relaxed


def _position_ok(chars: Sequence[str], k: int, no_repeat: bool, no_sequential: bool) -> bool:
    """True when no pair or triple touching index k breaks a constraint."""
    n = len(chars)
    if no_repeat:
        if k > 0 and chars[k] == chars[k - 1]:
            return False
        if k + 1 < n and chars[k] == chars[k + 1]:
            return False
    if no_sequential:
        for s in range(max(0, k - 2), min(k, n - 3) + 1):
            if is_sequential(chars[s], chars[s + 1], chars[s + 2]):
                return False
    return True


def _offending_near(
    chars: Sequence[str], i: int, j: int, no_repeat: bool, no_sequential: bool
) -> int:
    """Offending positions within two places of index i or index j."""
    n = len(chars)
    region = set(range(max(0, i - 2), min(n, i + 3)))
    region.update(range(max(0, j - 2), min(n, j + 3)))
    return sum(1 for p in region if not _position_ok(chars, p, no_repeat, no_sequential))


def _repair(chars: List[str], no_repeat: bool, no_sequential: bool) -> bool:
    """
    Swap each offending position with a randomly chosen partner.

    A swap is kept only when it lowers the number of offending positions
    around both indices. Positions outside those regions are untouched, so
    every kept swap lowers the total. Returns True when the arrangement
    honors the constraints.
    """
    n = len(chars)
    for _ in range(MAX_REPAIR_ROUNDS):
        bad = [i for i in range(n) if not _position_ok(chars, i, no_repeat, no_sequential)]
        if not bad:
            return True
        for i in bad:
            if _position_ok(chars, i, no_repeat, no_sequential):
                continue
            start = secure_random_int(n)
            for offset in range(n):
                j = (start + offset) % n
                if j == i or chars[j] == chars[i]:
                    continue
                before = _offending_near(chars, i, j, no_repeat, no_sequential)
                chars[i], chars[j] = chars[j], chars[i]
                if _offending_near(chars, i, j, no_repeat, no_sequential) < before:
                    break
                chars[i], chars[j] = chars[j], chars[i]
    return _arrangement_ok(chars, no_repeat, no_sequential)


def _shuffle(chars: List[str], no_repeat: bool, no_sequential: bool) -> int:
    """
    Shuffle `chars` in place so that it still honors the enabled
    constraints. Returns the number of shuffles performed.

    Re-shuffles a bounded number of times, then repairs the last shuffle by
    swaps. If that also fails, the incoming order is restored when it was
    valid; a violating result is only kept when the input already broke a
    constraint.
    """
    if not (no_repeat or no_sequential):
        secure_shuffle(chars)
        return 1

    original = list(chars)
    budget = SHUFFLE_DRAW_BUDGET // max(1, len(chars))
    max_attempts = max(1, min(MAX_SHUFFLE_ATTEMPTS, budget))
    attempts = 0
    while attempts < max_attempts:
        secure_shuffle(chars)
        attempts += 1
        if _arrangement_ok(chars, no_repeat, no_sequential):
            return attempts

    if _repair(chars, no_repeat, no_sequential):
        return attempts

    if _arrangement_ok(original, no_repeat, no_sequential):
        logger.debug("Shuffle repair failed; keeping the constrained fill order.")
        chars[:] = original
    else:
        logger.debug(
            "Kept arrangement that breaks a constraint after %d shuffles.",
            attempts,
        )
    return attempts


def generate_password_with_meta(
    config: PasswordConfig | None = None,
) -> GenerationMeta:
    """
    Generation pipeline with metadata:

    - Build the enabled classes and their combined alphabet.
    - If require_all_types: one character from each class, in class order.
    - Fill the rest from the combined alphabet with per-slot rejection.
    - Shuffle so seeded characters do not sit at the front.
    - Truncate to the requested length.

    Never raises for a degenerate config; see `spgen.config.validate_config`
    for the checks callers are expected to run.
    """
    cfg = config or DEFAULT_CONFIG

    classes = build_enabled_classes(cfg)
    alphabet = combined_alphabet(classes)
    target_length = max(0, cfg.length)

    logger.debug(
        "Generating password: length=%d classes=%s",
        target_length,
        ",".join(c.name for c in classes),
    )

    result: List[str] = []

    # --- guarantee one of each class ---
    if cfg.require_all_types:
        for char_class in classes:
            result.append(secure_choice(char_class.characters))

    # --- constrained fill ---
    relaxed = _fill(
        result,
        alphabet,
        target_length,
        cfg.no_consecutive_repeat,
        cfg.no_sequential,
    )

    # --- shuffle, then cut to length ---
    shuffles = _shuffle(result, cfg.no_consecutive_repeat, cfg.no_sequential)
    password = "".join(result)[:target_length]

    return GenerationMeta(
        password=password,
        classes=[c.name for c in classes],
        alphabet_size=len(alphabet),
        relaxed_slots=relaxed,
        shuffle_attempts=shuffles,
        max_entropy_bits=target_length * math.log2(len(alphabet)),
        config=cfg,
    )


def generate_password(
    config: PasswordConfig | None = None,
) -> str:
    """Return a password for `config` (DEFAULT_CONFIG when omitted)."""
    meta = generate_password_with_meta(config)
    return meta.password
