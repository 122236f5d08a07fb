"""Observations and their interpretation into semantic symbols."""

from __future__ import annotations

import json
from dataclasses import dataclass


def _report(*lines: str) -> tuple[str, ...]:
    """Print each line and return them."""
    for line in lines:
        print(line)
    return lines


@dataclass
class SemanticSymbol:
    """The meaning extracted from an input."""

    value: str

    def to_json(self) -> str:
        """Serialize to compact JSON."""
        return json.dumps({"value": self.value}, ensure_ascii=False, separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str) -> SemanticSymbol:
        """Parse a symbol from JSON; ValueError on malformed input."""
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object for SemanticSymbol")
        if "value" not in data:
            raise ValueError("missing field `value`")
        value = data["value"]
        if not isinstance(value, str):
            raise ValueError("field `value` must be a string")
        return cls(value=value)


@dataclass
class ObservationEvent:
    """Something observed, with where it came from and how sure we are."""

    text: str
    source: str
    uncertainty: float


def interpret(text: str) -> None:
    """Announce an interpreted input."""
    print(f"interpreted -> {text}")


def interpret_semantic(text: str) -> SemanticSymbol:
    """Turn raw text into a semantic symbol."""
    print("semantic interpretation started")
    return SemanticSymbol(value=text)


def interpret_observation(observation: ObservationEvent) -> SemanticSymbol:
    """Turn an observation into a semantic symbol of its text."""
    return SemanticSymbol(value=observation.text)


def emit_observation() -> tuple[str, ...]:
    """Announce an observation event; return the lines reported."""
    return _report("Observation event emitted")