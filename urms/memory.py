"""Memory traces, evolution history and graph persistence."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path

from urms.graph import Edge, Node, SemanticGraph, _display_number

DEFAULT_DUMP_PATH = "memory_dump.txt"

_FIELD_LINE = re.compile(r"^\s*(\w+): (.*),$")


def _report(*lines: str) -> tuple[str, ...]:
    """Print each line and return them."""
    for line in lines:
        print(line)
    return lines


@dataclass
class EvolutionHistory:
    """An ordered log of evolution events."""

    records: list[str] = field(default_factory=list)

    def add(self, event: str) -> None:
        """Record an event."""
        self.records.append(event)
        print(f"HISTORY ADD -> {event}")

    def show(self) -> None:
        """Print every recorded event."""
        print("===== EVOLUTION HISTORY =====")
        for item in self.records:
            print(item)


@dataclass
class MemoryRecord:
    """A weighted, tagged event."""

    event: str
    weight: float
    tag: str


@dataclass
class MemoryTrace:
    """A numbered piece of remembered content."""

    id: int
    content: str


@dataclass
class MemoryStore:
    """An ordered collection of memory traces."""

    traces: list[MemoryTrace] = field(default_factory=list)

    def store(self, trace: MemoryTrace) -> None:
        """Keep a trace."""
        print(f"STORE MEMORY => {trace.content}")
        self.traces.append(trace)

    def recall(self) -> None:
        """Print every stored trace."""
        print("MEMORY RECALL:")
        for trace in self.traces:
            print(f"[{trace.id}] {trace.content}")


def apply_decay(graph: SemanticGraph) -> None:
    """Run memory decay over the graph, listing its nodes."""
    print("Memory decay applied")
    for node in graph.nodes:
        print(f"memory node -> {node.name}")


def store_experience(graph: SemanticGraph) -> None:
    """List each node with its weight as experience."""
    print("EXPERIENCE MEMORY")
    for node in graph.nodes:
        print(f"memory node -> {node.name} weight={_display_number(node.weight)}")


def _dump_graph(graph: SemanticGraph) -> str:
    sections = (
        (
            "nodes",
            "Node",
            [
                [
                    ("id", str(node.id)),
                    ("name", json.dumps(node.name, ensure_ascii=False)),
                    ("activation", repr(float(node.activation))),
                    ("weight", repr(float(node.weight))),
                ]
                for node in graph.nodes
            ],
        ),
        (
            "edges",
            "Edge",
            [[("from", str(edge.source)), ("to", str(edge.target))] for edge in graph.edges],
        ),
    )
    lines = ["SemanticGraph {"]
    for field_name, struct_name, items in sections:
        if not items:
            lines.append(f"    {field_name}: [],")
            continue
        lines.append(f"    {field_name}: [")
        for fields in items:
            lines.append(f"        {struct_name} {{")
            lines.extend(f"            {key}: {value}," for key, value in fields)
            lines.append("        },")
        lines.append("    ],")
    lines.append("}")
    return "\n".join(lines)


def _parse_dump(text: str) -> SemanticGraph:
    """Rebuild a graph from the text written by save_graph; ValueError if malformed."""
    graph = SemanticGraph()
    kind: str | None = None
    fields: dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if stripped in ("Node {", "Edge {"):
            kind = stripped.split()[0]
            fields = {}
        elif stripped == "}," and kind is not None:
            try:
                if kind == "Node":
                    graph.nodes.append(
                        Node(
                            id=int(fields["id"]),
                            name=json.loads(fields["name"]),
                            activation=float(fields["activation"]),
                            weight=float(fields["weight"]),
                        )
                    )
                else:
                    graph.edges.append(Edge(int(fields["from"]), int(fields["to"])))
            except (KeyError, json.JSONDecodeError) as exc:
                raise ValueError(f"malformed {kind} entry in memory dump") from exc
            kind = None
        elif kind is not None:
            match = _FIELD_LINE.match(line)
            if match is None:
                raise ValueError(f"malformed line in memory dump: {line!r}")
            fields[match.group(1)] = match.group(2)
    return graph


def save_graph(graph: SemanticGraph, path: str | Path = DEFAULT_DUMP_PATH) -> None:
    """Write a readable dump of the graph to a file; OSError propagates on failure."""
    Path(path).write_text(_dump_graph(graph), encoding="utf-8")


def load_graph() -> SemanticGraph | None:
    """Restore the graph saved at the default dump path, or None if there is none."""
    path = Path(DEFAULT_DUMP_PATH)
    if not path.is_file():
        return None
    return _parse_dump(path.read_text(encoding="utf-8"))


def persist(graph: SemanticGraph) -> None:
    """Report saving the graph to persistent memory."""
    print("PERSISTENT MEMORY SAVE")
    print(f"saved nodes={len(graph.nodes)} edges={len(graph.edges)}")


def load_persistent() -> tuple[str, ...]:
    """Report loading persistent memory; return the lines reported."""
    return _report("PERSISTENT MEMORY LOAD")


def snapshot() -> tuple[str, ...]:
    """Report a memory snapshot; return the lines reported."""
    return _report("MEMORY SNAPSHOT CREATED")


def rollback() -> tuple[str, ...]:
    """Report a rollback; return the lines reported."""
    return _report("ROLLBACK EXECUTED")