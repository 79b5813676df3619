"""The answer of one puzzle part, and shared text constants."""

from __future__ import annotations

import os
from dataclasses import dataclass

DOUBLE_NEWLINE = "\r\n\r\n" if os.name == "nt" else "\n\n"


@dataclass(frozen=True)
class Solution:
    """A puzzle answer: an integer or a string, shown as plain text."""

    value: int | str

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, str)):
            raise TypeError(
                f"a solution must be an int or a str, not {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        return str(self.value)