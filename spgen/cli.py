"""
Command-line interface.

    spgen generate [--preset web] [--length 20] [--no-symbols] ...
    spgen analyze 'Xk9$mP2&nQ5@wL8#'
    spgen presets
    spgen tips
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable, List, Optional

from .config import (
    DEFAULT_CONFIG,
    PRESETS,
    SECURITY_RECOMMENDATIONS,
    PasswordConfig,
    config_from_preset,
    validate_config,
)
from .entropy import analyze_password_strength, estimate_cracking_time, format_entropy
from .generator import generate_password

logger = logging.getLogger(__name__)

EXIT_INVALID_CONFIG = 2


def _strength_record(password: str) -> dict:
    strength = analyze_password_strength(password)
    return {
        "password": password,
        "length": len(password),
        "bits": strength.bits,
        "score": strength.score,
        "label": strength.label,
        "crack_time": estimate_cracking_time(strength.bits),
    }


def _strength_line(record: dict) -> str:
    return (
        f"{record['label']} ({record['score']}/10, "
        f"{format_entropy(record['bits'])}, crack time: {record['crack_time']})"
    )


def config_from_args(args: argparse.Namespace) -> PasswordConfig:
    """
    Start from the preset (or DEFAULT_CONFIG) and apply explicit flags.
    """
    base = config_from_preset(args.preset) if args.preset else DEFAULT_CONFIG

    overrides = {}
    if args.length is not None:
        overrides["length"] = args.length
    for flag, field in (
        ("no_uppercase", "uppercase"),
        ("no_lowercase", "lowercase"),
        ("no_numbers", "numbers"),
        ("no_symbols", "symbols"),
    ):
        if getattr(args, flag):
            overrides[field] = False
    for flag, field in (
        ("avoid_ambiguous", "avoid_ambiguous"),
        ("require_all_types", "require_all_types"),
        ("no_repeat", "no_consecutive_repeat"),
        ("no_sequential", "no_sequential"),
    ):
        value = getattr(args, flag)
        if value is not None:
            overrides[field] = value

    return base.with_overrides(**overrides) if overrides else base


def cmd_generate(args: argparse.Namespace) -> int:
    config = config_from_args(args)

    result = validate_config(config)
    if not result.valid:
        if not args.no_validate:
            for error in result.errors:
                print(f"error: {error}", file=sys.stderr)
            return EXIT_INVALID_CONFIG
        logger.warning("Validation skipped: %s", "; ".join(result.errors))

    for _ in range(args.count):
        password = generate_password(config)
        if args.json:
            print(json.dumps(_strength_record(password)))
        elif args.show_strength:
            print(f"{password}\t{_strength_line(_strength_record(password))}")
        else:
            print(password)
    return 0


def _read_passwords(values: List[str]) -> Iterable[str]:
    for value in values:
        if value == "-":
            for line in sys.stdin:
                yield line.rstrip("\n")
        else:
            yield value


def cmd_analyze(args: argparse.Namespace) -> int:
    for password in _read_passwords(args.passwords):
        record = _strength_record(password)
        if args.json:
            print(json.dumps(record))
        else:
            print(_strength_line(record))
    return 0


def cmd_presets(args: argparse.Namespace) -> int:
    for key, preset in PRESETS.items():
        cfg = preset.config
        classes = [
            name
            for name, on in (
                ("upper", cfg.uppercase),
                ("lower", cfg.lowercase),
                ("digits", cfg.numbers),
                ("symbols", cfg.symbols),
            )
            if on
        ]
        print(f"{key:<8} {preset.name:<20} length {cfg.length:<3} {'+'.join(classes)}")
    return 0


def cmd_tips(args: argparse.Namespace) -> int:
    for tip in SECURITY_RECOMMENDATIONS:
        print(f"- {tip}")
    return 0


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _toggle(parser, on_flag: str, off_flag: str, dest: str, help_text: str) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument(on_flag, dest=dest, action="store_true", default=None, help=help_text)
    group.add_argument(off_flag, dest=dest, action="store_false", default=None,
                       help=f"undo {on_flag}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="spgen",
        description="Secure password generator and strength analyzer",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="generate passwords")
    gen.add_argument("--preset", choices=sorted(PRESETS), help="start from a named preset")
    gen.add_argument("-l", "--length", type=int, help="password length")
    gen.add_argument("--no-uppercase", action="store_true", help="exclude A-Z")
    gen.add_argument("--no-lowercase", action="store_true", help="exclude a-z")
    gen.add_argument("--no-numbers", action="store_true", help="exclude 0-9")
    gen.add_argument("--no-symbols", action="store_true", help="exclude punctuation")
    _toggle(gen, "--avoid-ambiguous", "--allow-ambiguous", "avoid_ambiguous",
            "exclude I, l, 1, O, 0, o")
    _toggle(gen, "--require-all-types", "--any-types", "require_all_types",
            "at least one character of each selected type")
    _toggle(gen, "--no-repeat", "--allow-repeat", "no_repeat", "disallow aa, 00, @@")
    _toggle(gen, "--no-sequential", "--allow-sequential", "no_sequential",
            "disallow abc, 123, cba, 321")
    gen.add_argument("-n", "--count", type=positive_int, default=1, help="how many passwords")
    gen.add_argument("--show-strength", action="store_true", help="append strength details")
    gen.add_argument("--json", action="store_true", help="one JSON object per password")
    gen.add_argument("--no-validate", action="store_true",
                     help="skip length/character-type validation")
    gen.set_defaults(func=cmd_generate)

    ana = sub.add_parser("analyze", help="score existing passwords")
    ana.add_argument("passwords", nargs="+", help="passwords, or - to read lines from stdin")
    ana.add_argument("--json", action="store_true", help="one JSON object per password")
    ana.set_defaults(func=cmd_analyze)

    pre = sub.add_parser("presets", help="list presets")
    pre.set_defaults(func=cmd_presets)

    tips = sub.add_parser("tips", help="password hygiene recommendations")
    tips.set_defaults(func=cmd_tips)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for `spgen`, `python -m spgen` or `run_spgen.py`.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)
