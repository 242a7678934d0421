from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

YES = {"y", "yes"}


@dataclass
class Prompter:
    """Blocking yes/no questions on the terminal. Anything but y/yes is no."""

    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)

    def ask(self, question: str) -> bool:
        self.stdout.write(f"{question} [y/N] ")
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            # EOF counts as the default answer.
            self.stdout.write("\n")
            return False
        return line.strip().lower() in YES

    def confirm_step(self, description: str) -> bool:
        self.stdout.write(f"\n[STEP] {description}\n")
        return self.ask("Proceed?")

    def show(self, text: str) -> None:
        self.stdout.write(text)
        if not text.endswith("\n"):
            self.stdout.write("\n")
        self.stdout.flush()
