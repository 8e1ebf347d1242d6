#!/usr/bin/env python3
"""
num2text — Entry Point
======================

Prints sample conversions for every registered language.

Usage:
    python main.py                          # built-in samples
    python main.py 42 -7.5 1e21 abc         # your own values, every language
    NUM2TEXT_LOG_LEVEL=DEBUG python main.py # show engine logging
"""

from __future__ import annotations

import logging
import os
import sys

from num2text import Num2Text, OutputMode, RenderOptions, available_locales

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Samples ────────────────────────────────────────────────────────

SAMPLES: list[tuple[str, object, RenderOptions]] = [
    ("plain", 0, RenderOptions()),
    ("plain", 21, RenderOptions()),
    ("plain", -1234, RenderOptions()),
    ("plain", "1000000", RenderOptions()),
    ("plain", "123456789.05", RenderOptions()),
    ("plain", 10**27, RenderOptions()),
    ("currency", "1.50", RenderOptions(mode=OutputMode.CURRENCY)),
    ("currency", "2021.02", RenderOptions(mode=OutputMode.CURRENCY)),
    ("year", 1984, RenderOptions(mode=OutputMode.YEAR)),
    ("year", 2024, RenderOptions(mode=OutputMode.YEAR, include_era_suffix=True)),
    ("year", -500, RenderOptions(mode=OutputMode.YEAR)),
    ("special", float("inf"), RenderOptions()),
    ("invalid", "abc", RenderOptions()),
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_language(converter: Num2Text, samples) -> int:
    """Print one language block. Returns the number of failed conversions."""
    binding = converter.binding
    print(f"\n{'=' * _WIDTH}")
    print(
        f"{_BOLD}{_CYAN}  {binding.name} ({binding.code}){_RESET}"
        f"  {_DIM}{binding.magnitude.name} scale{_RESET}"
    )
    print(f"{'─' * _WIDTH}")

    failures = 0
    for label, value, options in samples:
        result = converter.try_convert(value, options)
        text = converter.resolve(result)
        color = _GREEN if result.ok else _RED
        if not result.ok:
            failures += 1
        print(f"  {_DIM}{label:<9}{_RESET}{str(value):>16}  {color}{text}{_RESET}")
    return failures


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Convert the samples (or argv values) in every language."""
    logging.basicConfig(level=os.getenv("NUM2TEXT_LOG_LEVEL", "WARNING").upper())

    if len(sys.argv) > 1:
        samples = [("plain", arg, RenderOptions()) for arg in sys.argv[1:]]
    else:
        samples = SAMPLES

    failures = 0
    for code in available_locales():
        failures += print_language(Num2Text(code), samples)

    print(f"{'=' * _WIDTH}")
    if failures:
        print(f"  {_RED}{_BOLD}{failures} value(s) used the fallback text{_RESET}")
    else:
        print(f"  {_GREEN}{_BOLD}Every value converted{_RESET}")
    print(f"{'=' * _WIDTH}\n")


if __name__ == "__main__":
    main()
