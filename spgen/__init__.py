"""
Secure Password Generator package.
"""

from .config import PasswordConfig, DEFAULT_CONFIG, validate_config
from .generator import generate_password, generate_password_with_meta
from .entropy import analyze_password_strength, estimate_cracking_time, EntropyResult

__all__ = [
    "PasswordConfig",
    "DEFAULT_CONFIG",
    "validate_config",
    "generate_password",
    "generate_password_with_meta",
    "analyze_password_strength",
    "estimate_cracking_time",
    "EntropyResult",
]
