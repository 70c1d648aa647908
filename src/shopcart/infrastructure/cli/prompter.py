"""Prompt providers for the interactive shell.

The session never reads input directly; it asks a Prompter, so tests can
script the answers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import click


class Prompter(ABC):

    @abstractmethod
    def ask(self, label: str) -> str | None:
        """Return the answer to *label*, or None if nothing was entered."""


class ClickPrompter(Prompter):

    def ask(self, label: str) -> str | None:
        answer = click.prompt(label, default="", show_default=False, prompt_suffix=" ")
        return answer or None
