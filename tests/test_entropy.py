"""Tests for the strength analyzer and cracking-time estimator."""

from __future__ import annotations

import math

import pytest

from spgen.entropy import (
    EntropyResult,
    analyze_password_strength,
    calculate_entropy,
    estimate_cracking_time,
    format_entropy,
    strength_label,
)
from spgen.generator import generate_password
from spgen.config import PasswordConfig


class TestCalculateEntropy:
    def test_empty_is_zero(self):
        assert calculate_entropy("") == 0.0

    def test_single_repeated_character_is_zero(self):
        assert calculate_entropy("aaaa") == 0.0

    def test_all_distinct(self):
        assert math.isclose(calculate_entropy("abcd"), 8.0)

    def test_two_symbols_even_split(self):
        assert math.isclose(calculate_entropy("aabb"), 4.0)

    def test_order_does_not_matter(self):
        assert math.isclose(calculate_entropy("abab"), calculate_entropy("aabb"))


class TestAnalyze:
    def test_empty(self):
        assert analyze_password_strength("") == EntropyResult(0.0, 0, "Weak", "red")

    @pytest.mark.parametrize("value", [None, 12345, b"bytes", ["a"]])
    def test_non_string_is_zero_result(self, value):
        result = analyze_password_strength(value)
        assert (result.bits, result.score, result.label) == (0.0, 0, "Weak")

    def test_weak_password(self):
        assert analyze_password_strength("pass123").label == "Weak"

    def test_strong_password(self):
        result = analyze_password_strength("Xk9$mP2&nQ5@wL8#")
        assert result.label in {"Strong", "Excellent"}
        assert result.score == 8
        assert result.bits == 64.0

    def test_known_password_bits(self):
        result = analyze_password_strength("password")
        assert 0 < result.bits < 50
        assert result.bits == 22.0
        assert result.score == 2

    def test_maximum_score(self):
        result = analyze_password_strength("Xk9$mP2&nQ5@wL8#aB3!")
        assert result.score == 10
        assert result.label == "Excellent"
        assert result.color == "emerald"

    def test_unicode_counts_as_symbol(self):
        assert analyze_password_strength("é").score == 1

    def test_bits_rounded_to_one_decimal(self):
        bits = analyze_password_strength("aab").bits
        assert bits == 2.8

    def test_generated_passwords_score_in_range(self):
        for length in (8, 16, 24, 40):
            result = analyze_password_strength(generate_password(PasswordConfig(length=length)))
            assert 0 <= result.score <= 10
            assert result.label == strength_label(result.score)[0]


class TestStrengthLabel:
    @pytest.mark.parametrize(
        "score, label",
        [(0, "Weak"), (3, "Weak"), (4, "Fair"), (5, "Fair"), (6, "Good"),
         (7, "Good"), (8, "Strong"), (9, "Strong"), (10, "Excellent")],
    )
    def test_thresholds(self, score, label):
        assert strength_label(score)[0] == label


class TestCrackingTime:
    def test_zero_bits_is_instant(self):
        assert estimate_cracking_time(0) == "instant"

    def test_128_bits_is_centuries(self):
        assert estimate_cracking_time(128).endswith(" centuries")

    def test_seconds_bucket(self):
        # 2**40 / 2e10 ~= 54.98 s
        assert estimate_cracking_time(40) == "54 seconds"

    def test_hours_bucket(self):
        # 2**50 / 2e10 ~= 56295 s ~= 15.6 h
        assert estimate_cracking_time(50) == "15 hours"

    def test_huge_values_do_not_overflow(self):
        assert estimate_cracking_time(1e6).endswith(" centuries")
        assert estimate_cracking_time(float("inf")).endswith(" centuries")

    @pytest.mark.parametrize("value", [float("nan"), "abc", None, -10])
    def test_degenerate_input_is_instant(self, value):
        assert estimate_cracking_time(value) == "instant"


def test_format_entropy_rounds_half_up():
    assert format_entropy(12.25) == "12.3 bits"
    assert format_entropy(0) == "0.0 bits"
