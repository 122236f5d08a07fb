"""Semantic graph of named nodes joined by directed edges."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


def _display_number(value: float) -> str:
    """Render a number the way the runtime logs it: integral values without a fraction."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass
class Node:
    """A concept in the graph."""

    id: int
    name: str
    activation: float = 0.0
    weight: float = 1.0


@dataclass(frozen=True)
class Edge:
    """A directed link between two node ids."""

    source: int
    target: int


class Relation(Enum):
    """Kinds of relation a link may express."""

    CONTROLS = "Controls"
    DEPENDS_ON = "DependsOn"
    CONTAINS = "Contains"
    EXECUTES = "Executes"
    EVOLVES_TO = "EvolvesTo"


@dataclass
class Symbol:
    """A bare named symbol."""

    name: str


@dataclass
class SemanticGraph:
    """Nodes and the directed edges between them."""

    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def add_node(self, name: str) -> int:
        """Append a node with the next sequential id and return that id."""
        node_id = len(self.nodes) + 1
        self.nodes.append(Node(id=node_id, name=name))
        print(f"created node -> {node_id}")
        return node_id

    def add_edge(self, source: int, target: int) -> None:
        """Append a directed edge."""
        self.edges.append(Edge(source, target))
        print(f"created edge -> {source} -> {target}")


def print_graph_state(graph: SemanticGraph) -> None:
    """Print the counts, nodes and edges of a graph."""
    print("GRAPH STATE")
    print(f"nodes -> {len(graph.nodes)}")
    print(f"edges -> {len(graph.edges)}")
    for node in graph.nodes:
        print(
            f"NODE [{node.id}] {node.name} "
            f"activation={_display_number(node.activation)} "
            f"weight={_display_number(node.weight)}"
        )
    for edge in graph.edges:
        print(f"EDGE {edge.source} -> {edge.target}")