from __future__ import annotations

from typing import Protocol


class Console(Protocol):
    def read_line(self, prompt: str = "") -> str:
        raise NotImplementedError

    def write(self, text: str = "") -> None:
        raise NotImplementedError


class StdConsole:
    """Console backed by stdin/stdout."""

    def read_line(self, prompt: str = "") -> str:
        return input(prompt)

    def write(self, text: str = "") -> None:
        print(text)
