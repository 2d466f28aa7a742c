"""Prompter Protocol — shows text to the learner and returns their reply."""

from typing import Protocol


class Prompter(Protocol):
    def ask(self, text: str) -> str: ...
