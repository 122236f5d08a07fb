"""Evolution steps that grow, mutate and adjust a semantic graph."""

from __future__ import annotations

from urms.graph import SemanticGraph

_DEFAULT_ENGINE = "AdaptiveExecutionEngine"
_ENGINE_FOR_SIGNAL = {
    "system overloaded": "ParallelExecutionEngine",
    "memory overflow": "CompressedMemoryEngine",
}
_ACTIVATION_BOOST = 0.1


def _report(*lines: str) -> tuple[str, ...]:
    """Print each line and return them."""
    for line in lines:
        print(line)
    return lines


def _grow(graph: SemanticGraph, name: str) -> int:
    """Add a node and chain it to the node created just before it."""
    node_id = graph.add_node(name)
    if node_id > 1:
        graph.add_edge(node_id - 1, node_id)
    return node_id


def evolve(graph: SemanticGraph) -> int:
    """Grow the graph by one evolved node and return its id."""
    node_id = _grow(graph, "evolved")
    print("Evolution applied")
    return node_id


def adaptive_evolve(graph: SemanticGraph) -> tuple[str, ...]:
    """Run an adaptive evolution pass; return the lines reported."""
    return _report("Adaptive evolution started", "Adaptive evolution finished")


def decide(signal: str) -> str:
    """Choose the execution engine suited to a system signal."""
    return _ENGINE_FOR_SIGNAL.get(signal, _DEFAULT_ENGINE)


def record_history(event: str) -> None:
    """Log an evolution event."""
    print("EVOLUTION HISTORY")
    print(f"record -> {event}")
    print("record -> memory persisted")
    print("record -> reasoning adapted")


def meta_mutate(graph: SemanticGraph) -> tuple[str, ...]:
    """Run a meta mutation pass; return the lines reported."""
    return _report("Meta evolution started", "Meta mutation applied")


def meta_evolve(graph: SemanticGraph) -> int:
    """Grow the graph by one meta node and return its id."""
    print("Meta evolution started")
    node_id = _grow(graph, "meta")
    print("Meta evolution finished")
    return node_id


def mutate(graph: SemanticGraph) -> int:
    """Grow the graph by one mutated node and return its id."""
    print("DYNAMIC MUTATION")
    node_id = _grow(graph, "MutatedNode")
    print(f"mutation node -> {node_id}")
    print("Mutation completed")
    return node_id


def boost_activation(graph: SemanticGraph) -> None:
    """Raise the activation of every node by a fixed step."""
    print("activation propagated")
    for node in graph.nodes:
        node.activation += _ACTIVATION_BOOST


def self_evolve(graph: SemanticGraph) -> tuple[str, ...]:
    """Run a self evolution pass; return the lines reported."""
    return _report("Self evolution started", "Self evolution finished")