"""
Configuration for the Secure Password Generator.

The core generator and analyzer accept any `PasswordConfig`, valid or not.
Length bounds and "at least one character type" are checked separately by
`validate_config`, which the CLI and GUI call before generating.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, List


# NIST SP 800-63B length guidance.
MIN_LENGTH = 8
RECOMMENDED_LENGTH = 12
MAX_LENGTH = 64


@dataclass(frozen=True)
class PasswordConfig:
    # Desired password length in characters.
    length: int = 16

    # Character classes to draw from.
    uppercase: bool = True
    lowercase: bool = True
    numbers: bool = True
    symbols: bool = True

    # Drop I, l, 1, O, 0, o from letters and digits (symbols untouched).
    avoid_ambiguous: bool = False
    # Every enabled class contributes at least one character.
    require_all_types: bool = False
    # No "aa", "00", "@@".
    no_consecutive_repeat: bool = False
    # No "abc", "321" style runs of three code points.
    no_sequential: bool = False

    def with_overrides(self, **changes) -> "PasswordConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @property
    def enabled_class_count(self) -> int:
        return sum((self.uppercase, self.lowercase, self.numbers, self.symbols))


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = PasswordConfig(
    length=16,
    avoid_ambiguous=True,
    require_all_types=True,
    no_consecutive_repeat=True,
    no_sequential=True,
)


@dataclass(frozen=True)
class Preset:
    name: str
    config: PasswordConfig


PRESETS: Dict[str, Preset] = {
    "web": Preset("Web Account", PasswordConfig(length=16)),
    "banking": Preset("Banking & Finance", PasswordConfig(length=24)),
    "wifi": Preset("WiFi Network", PasswordConfig(length=20, symbols=False)),
    "pin": Preset(
        "PIN Code",
        PasswordConfig(length=6, uppercase=False, lowercase=False, symbols=False),
    ),
    "maximum": Preset("Maximum Security", PasswordConfig(length=32)),
}


SECURITY_RECOMMENDATIONS = (
    "Use unique passwords for each account",
    "Enable two-factor authentication when available",
    "Store passwords in a reputable password manager",
    "Change passwords if you suspect a breach",
    "Avoid using personal information in passwords",
    "Do not share passwords via email or messaging",
)


def config_from_preset(name: str, **overrides) -> PasswordConfig:
    """
    Build a config from a named preset, optionally overriding fields.

    Raises KeyError for an unknown preset name.
    """
    config = PRESETS[name].config
    if overrides:
        config = config.with_overrides(**overrides)
    return config


# ---------- validation ----------


class InvalidConfigError(ValueError):
    """Raised by `ensure_valid` when a configuration fails validation."""

    def __init__(self, errors: List[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = list(errors)


@dataclass(frozen=True)
class ConfigValidation:
    valid: bool
    errors: List[str]


def validate_config(config: PasswordConfig) -> ConfigValidation:
    errors: List[str] = []

    if config.length < MIN_LENGTH:
        errors.append(f"Password length must be at least {MIN_LENGTH} characters")

    if config.length > MAX_LENGTH:
        errors.append(f"Password length cannot exceed {MAX_LENGTH} characters")

    if config.enabled_class_count == 0:
        errors.append("At least one character type must be selected")

    return ConfigValidation(valid=not errors, errors=errors)


def ensure_valid(config: PasswordConfig) -> PasswordConfig:
    """
    Return `config` unchanged if it validates, else raise InvalidConfigError.
    """
    result = validate_config(config)
    if not result.valid:
        raise InvalidConfigError(result.errors)
    return config
