"""Passes that inspect, reason over, rewrite and prune a semantic graph."""

from __future__ import annotations

import math
from dataclasses import dataclass

from urms.graph import Edge, SemanticGraph, _display_number

DEFAULT_MAX_NODES = 32
_REASONING_WEIGHT_STEP = 0.05
_REWRITTEN_NAME = "ReflectiveSemanticEngine"


def _report(*lines: str) -> tuple[str, ...]:
    """Print each line and return them."""
    for line in lines:
        print(line)
    return lines


@dataclass
class Contradiction:
    """Two nodes that contradict each other, with how badly."""

    node_a: int
    node_b: int
    severity: float = 1.0


@dataclass
class RewriteRule:
    """Rewrite one name into another."""

    source: str
    target: str


@dataclass
class Rule:
    """A named validation rule."""

    name: str


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return _display_number(value)


def propagate_activation(graph: SemanticGraph) -> list[Edge]:
    """Walk every edge, announcing activation along it, and return the edges walked."""
    print("Activation propagation started")
    walked = list(graph.edges)
    for edge in walked:
        print(f"activation -> {edge.source} -> {edge.target}")
    print("Activation propagated")
    return walked


def detect_contradictions(graph: SemanticGraph) -> list[Contradiction]:
    """Find edges that loop a node back onto itself."""
    print("CONTRADICTION ENGINE")
    found = [
        Contradiction(node_a=edge.source, node_b=edge.target)
        for edge in graph.edges
        if edge.source == edge.target
    ]
    for contradiction in found:
        print(
            f"contradiction -> {contradiction.node_a} <-> {contradiction.node_b} "
            f"severity={_display_number(contradiction.severity)}"
        )
    print("Contradiction scan finished")
    return found


def query(graph: SemanticGraph) -> list[tuple[int, int]]:
    """List every relation in the graph as (source, target) pairs."""
    print("Query engine started")
    relations = [(edge.source, edge.target) for edge in graph.edges]
    for source, target in relations:
        print(f"relation -> {source} -> {target}")
    print("Query engine finished")
    return relations


def reflect(graph: SemanticGraph) -> float:
    """Report graph size and return the average node weight (NaN when empty)."""
    print("Reflection started")
    print(f"nodes count -> {len(graph.nodes)}")
    print(f"edges count -> {len(graph.edges)}")
    if graph.nodes:
        average = sum(node.weight for node in graph.nodes) / len(graph.nodes)
    else:
        average = math.nan
    print(f"average weight -> {_format_float(average)}")
    print("Reflection finished")
    return average


def reflect_nodes(graph: SemanticGraph) -> list[str]:
    """Report graph size and return the names of its nodes."""
    print("Reflection started")
    print(f"nodes count -> {len(graph.nodes)}")
    print(f"edges count -> {len(graph.edges)}")
    names = [node.name for node in graph.nodes]
    for name in names:
        print(f"reflect node -> {name}")
    print("Reflection finished")
    return names


def think(graph: SemanticGraph) -> None:
    """Strengthen every node's weight by a small step."""
    for node in graph.nodes:
        node.weight += _REASONING_WEIGHT_STEP
    print("Autonomous reasoning finished")


def recurse(graph: SemanticGraph, depth: int) -> list[int]:
    """Grow a chain of `depth` recursive nodes and return their ids."""
    print("RECURSIVE ENGINE")
    created = []
    for level in range(depth):
        node_id = graph.add_node(f"RecursiveNode{level}")
        if node_id > 1:
            graph.add_edge(node_id - 1, node_id)
        print(f"recursive depth -> {level}")
        created.append(node_id)
    print("Recursive engine finished")
    return created


def rewrite(graph: SemanticGraph) -> bool:
    """Rename the first node to its reflective form; return whether a node was renamed."""
    print("rewrite engine started")
    rewritten = bool(graph.nodes)
    if rewritten:
        first = graph.nodes[0]
        first.name = _REWRITTEN_NAME
        print(f"rewrite -> SemanticEngine -> {first.name}")
    print("rewrite engine finished")
    return rewritten


def validate_truth() -> bool:
    """Run truth validation; it always holds."""
    print("truth validation started")
    result = True
    print(f"truth valid -> {str(result).lower()}")
    return result


def validate_graph(graph: SemanticGraph) -> bool:
    """A graph is valid when it has at least one node."""
    result = len(graph.nodes) > 0
    print(f"truth valid -> {str(result).lower()}")
    return result


def save_history(graph: SemanticGraph) -> tuple[str, ...]:
    """Record that the graph has evolved; return the lines reported."""
    return _report(
        "EVOLUTION HISTORY",
        "record -> graph evolved",
        "record -> memory persisted",
        "record -> reasoning adapted",
    )


def prune(graph: SemanticGraph, max_nodes: int = DEFAULT_MAX_NODES) -> int:
    """Drop the oldest nodes beyond `max_nodes` and edges out of range; return nodes removed."""
    print("GRAPH PRUNER")
    if len(graph.nodes) <= max_nodes:
        print("pruning skipped")
        return 0

    remove_count = len(graph.nodes) - max_nodes
    del graph.nodes[:remove_count]
    limit = len(graph.nodes)
    graph.edges[:] = [
        edge for edge in graph.edges if edge.source < limit and edge.target < limit
    ]

    print(f"nodes after prune -> {len(graph.nodes)}")
    print(f"edges after prune -> {len(graph.edges)}")
    return remove_count