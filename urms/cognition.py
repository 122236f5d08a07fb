"""Cognitive state that drifts each cycle."""

from __future__ import annotations

from dataclasses import dataclass

from urms.graph import _display_number


@dataclass
class CognitiveState:
    """Energy, entropy, focus and stability of the reasoner."""

    energy: float = 1.0
    entropy: float = 0.0
    focus: float = 1.0
    stability: float = 1.0
    recursion_depth: int = 0

    def evolve(self) -> None:
        """Advance one cycle: decay energy and focus, raise entropy and depth."""
        self.energy *= 0.99
        self.entropy += 0.01
        self.focus *= 0.995
        self.recursion_depth += 1
        if self.entropy > 1.0:
            self.stability *= 0.95

        print("COGNITIVE STATE")
        print(f"energy -> {_display_number(self.energy)}")
        print(f"entropy -> {_display_number(self.entropy)}")
        print(f"focus -> {_display_number(self.focus)}")
        print(f"stability -> {_display_number(self.stability)}")
        print(f"recursion depth -> {self.recursion_depth}")