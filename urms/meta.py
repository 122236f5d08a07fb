"""Meta-level inspection, prediction and self-analysis of a graph."""

from __future__ import annotations

from urms.graph import SemanticGraph, _display_number

META_RULES = (
    "preserve stability",
    "increase adaptation",
    "optimize reasoning",
)
_UNSTABLE_DENSITY = 1.5
_PREDICTED_NODE_GROWTH = 5
_PREDICTED_EDGE_GROWTH = 8


def _report(*lines: str) -> tuple[str, ...]:
    """Print each line and return them."""
    for line in lines:
        print(line)
    return lines


def analyze_layer() -> list[str]:
    """Report the meta rules and return them."""
    print("META LAYER")
    rules = list(META_RULES)
    print(f"rules -> {len(rules)}")
    for rule in rules:
        print(f"rule -> {rule}")
    print("meta memory -> 0")
    return rules


def inspect(graph: SemanticGraph) -> float:
    """Report the graph's edge density and return it."""
    print("META OBSERVER")
    print(f"nodes -> {len(graph.nodes)}")
    print(f"edges -> {len(graph.edges)}")
    density = len(graph.edges) / len(graph.nodes) if graph.nodes else 0.0
    print(f"graph density -> {_display_number(density)}")
    if density > _UNSTABLE_DENSITY:
        print("meta warning -> unstable growth")
    print("Meta observer finished")
    return density


def predict(graph: SemanticGraph) -> tuple[int, int]:
    """Predict future node and edge counts."""
    print("FUTURE PREDICTOR")
    future_nodes = len(graph.nodes) + _PREDICTED_NODE_GROWTH
    future_edges = len(graph.edges) + _PREDICTED_EDGE_GROWTH
    print(f"predicted nodes -> {future_nodes}")
    print(f"predicted edges -> {future_edges}")
    print("system trend -> expansion")
    return future_nodes, future_edges


def self_analyze(graph: SemanticGraph) -> str:
    """Judge the graph's cognitive maturity by its size and return the verdict."""
    print("SELF ANALYSIS")
    count = len(graph.nodes)
    if count < 3:
        verdict = "weak cognition"
    elif count < 10:
        verdict = "stable cognition"
    else:
        verdict = "expanding intelligence"
    print(f"analysis -> {verdict}")
    print(f"node count -> {count}")
    print(f"edge count -> {len(graph.edges)}")
    return verdict


def self_rewrite() -> tuple[str, ...]:
    """Run a self rewrite pass; return the lines reported."""
    return _report("Self rewrite executed")