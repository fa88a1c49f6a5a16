"""Parse made-attempted shooting tokens such as ``"6-16"``."""

from __future__ import annotations

import re
from typing import Tuple


_EMPTY_TOKENS = {"", "-", "--", "0"}
_SPLIT_PATTERN = re.compile(r"^(\d+)\s*-\s*(\d+)$")


def parse_shooting_split(token: object) -> Tuple[int, int]:
    """Return ``(made, attempted)``; placeholders and malformed tokens yield ``(0, 0)``."""

    if token is None or isinstance(token, bool):
        return 0, 0
    if isinstance(token, (int, float)):
        # Bare numbers only show up as the "0" placeholder.
        return 0, 0
    text = str(token).strip()
    if text in _EMPTY_TOKENS:
        return 0, 0
    match = _SPLIT_PATTERN.match(text)
    if match is None:
        return 0, 0
    return int(match.group(1)), int(match.group(2))


def format_shooting_split(made: int, attempted: int) -> str:
    return f"{made}-{attempted}"
