from __future__ import annotations

from typing import List, Tuple


# Code point ranges rendered two columns wide by common terminals.
EMOJI_RANGES: List[Tuple[int, int]] = [
    (0x1F600, 0x1F64F),
    (0x1F300, 0x1F5FF),
    (0x1F680, 0x1F6FF),
    (0x1F1E0, 0x1F1FF),
    (0x2702, 0x27B0),
    (0x24C2, 0x1F251),
]

SUCCESS_TEMPLATE = "✨ It works! Answer is {actual} ✅"
FAILURE_TEMPLATE = "🚧 Oh, shieeet, answer is {actual} instead of {expected} ❌"


def is_emoji(char: str) -> bool:
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")
    code = ord(char)
    return any(low <= code <= high for low, high in EMOJI_RANGES)


def on_screen_len(text: str) -> int:
    """Return the number of terminal columns text occupies."""
    return sum(2 if is_emoji(char) else 1 for char in text)


def at_idx(idx: int) -> range:
    return range(idx, idx + 1)


def result_message(actual: int, expected: int) -> str:
    if actual <= expected:
        return SUCCESS_TEMPLATE.format(actual=actual)
    return FAILURE_TEMPLATE.format(actual=actual, expected=expected)


def banner(message: str) -> str:
    border = "-" * (on_screen_len(message) + 4)
    return f"{border}\n| {message} |\n{border}"
