"""Utility functions for Hue control.

This module contains helper functions used across the application:
- parse_brightness: Convert a brightness argument, defaulting to full brightness
- print_json: Pretty-print a bridge response
- similarity_score: Score a typed command name against a known one
- find_similar_strings: Pick command names to suggest in the usage banner
"""

import json
from typing import Any

import click

MAX_BRIGHTNESS = 254


def parse_brightness(value: str) -> int:
    """Parse a brightness argument.

    Anything that isn't an integer falls back to MAX_BRIGHTNESS. The range
    is left for the bridge to enforce.
    """
    try:
        return int(value)
    except (TypeError, ValueError):
        return MAX_BRIGHTNESS


def format_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def print_json(data: Any):
    """Print a decoded bridge response as indented JSON."""
    click.echo(format_json(data))


def similarity_score(s1: str, s2: str) -> int:
    """Score how closely a mistyped command name resembles a known one.

    Whole-name, prefix and substring matches rank highest; otherwise the
    score grows with the characters of s1 found in order within s2. Zero
    means the usage banner should not suggest s2 at all.
    """
    typed, known = s1.lower(), s2.lower()

    if typed == known:
        return 100
    if known.startswith(typed) or typed.startswith(known):
        return 80
    if typed in known or known in typed:
        return 60

    remaining = iter(known)
    in_order = sum(1 for char in typed if char in remaining)
    score = in_order * 50 // max(len(typed), len(known), 1)
    return score if score > 20 else 0


def find_similar_strings(target: str, candidates: list[str], limit: int = 3) -> list[str]:
    """Find candidates similar to target, most similar first.

    Duplicate candidates are only reported once.
    """
    scored = []
    for candidate in dict.fromkeys(candidates):
        score = similarity_score(target, candidate)
        if score > 0:
            scored.append((score, candidate))

    scored.sort(key=lambda x: x[0], reverse=True)
    return [candidate for _, candidate in scored[:limit]]
