"""Runtime loop, scheduler, event queue and the autonomous runner."""

from __future__ import annotations

import argparse
from collections import deque
from dataclasses import dataclass, field

from urms.analysis import propagate_activation, validate_truth
from urms.evolution import adaptive_evolve, evolve, meta_mutate, record_history, self_evolve
from urms.events import RuntimeEvent, dispatch
from urms.graph import Edge, Node, SemanticGraph
from urms.interpretation import interpret

DEFAULT_CYCLES = 5


def _report(*lines: str) -> tuple[str, ...]:
    """Print each line and return them."""
    for line in lines:
        print(line)
    return lines


@dataclass
class QueuedEvent:
    """A named event waiting in the queue."""

    name: str


@dataclass
class EventQueue:
    """First-in, first-out queue of named events."""

    events: deque[QueuedEvent] = field(default_factory=deque)

    def push(self, name: str) -> None:
        """Enqueue an event by name."""
        self.events.append(QueuedEvent(name))

    def pop(self) -> QueuedEvent | None:
        """Dequeue the oldest event, or None when the queue is empty."""
        return self.events.popleft() if self.events else None

    def __len__(self) -> int:
        return len(self.events)


@dataclass
class RuntimeState:
    """Whether the runtime runs, and how many ticks have passed."""

    running: bool = True
    tick: int = 0

    def next_tick(self) -> None:
        """Advance one tick."""
        self.tick += 1


def run_engine() -> tuple[str, ...]:
    """Start the runtime engine; return the lines reported."""
    return _report("RuntimeEngine started")


def process_events(graph: SemanticGraph) -> None:
    """Add the event and signal nodes and link node 1 to node 2."""
    print("event loop started")
    graph.add_node("event")
    graph.add_node("signal")
    graph.add_edge(1, 2)
    print("event loop finished")


def run_loop(graph: SemanticGraph) -> tuple[str, ...]:
    """Run one pass of the runtime loop; return the lines reported."""
    return _report(
        "Runtime loop started",
        "Interpreted -> system overload",
        "rewrite engine started",
        "rewrite -> SemanticEngine -> ReflectiveSemanticEngine",
        "rewrite engine finished",
        "Runtime loop finished",
    )


def schedule(graph: SemanticGraph) -> None:
    """Run one scheduler cycle: interpret, then evolve the graph."""
    print("Scheduler started")
    interpret("scheduler cycle")
    evolve(graph)
    print("Scheduler finished")


def _seed_graph() -> SemanticGraph:
    graph = SemanticGraph()
    graph.nodes.append(Node(id=1, name="SemanticEngine", activation=1.0, weight=1.0))
    graph.nodes.append(
        Node(id=2, name="ReflectiveSemanticEngine", activation=1.0, weight=1.0)
    )
    graph.edges.append(Edge(1, 2))
    return graph


def _run_cycle(graph: SemanticGraph, cycle: int) -> None:
    print()
    print("========================")
    print(f"AUTONOMOUS CYCLE -> {cycle}")
    print("========================")

    run_loop(graph)
    meta_mutate(graph)
    self_evolve(graph)
    adaptive_evolve(graph)
    record_history("graph evolved")

    print("QUERY ENGINE")
    for edge in graph.edges:
        print(f"relation -> {edge.source} -> {edge.target}")
    print("Query engine finished")

    validate_truth()
    propagate_activation(graph)

    print("Reflection started")
    print(f"nodes count -> {len(graph.nodes)}")
    print(f"edges count -> {len(graph.edges)}")
    print("Reflection finished")

    print("GRAPH STATE")
    print(f"nodes -> {len(graph.nodes)}")
    print(f"edges -> {len(graph.edges)}")


def run_autonomous(cycles: int = DEFAULT_CYCLES) -> SemanticGraph:
    """Seed a graph and run the autonomous cycles over it; return the graph."""
    if cycles < 0:
        raise ValueError("cycles must not be negative")
    print("URMS AUTONOMOUS RUNTIME STARTED")
    graph = _seed_graph()
    dispatch(RuntimeEvent.SYSTEM_OVERLOAD)
    for cycle in range(cycles):
        _run_cycle(graph, cycle)
    print()
    print("URMS AUTONOMOUS RUNTIME FINISHED")
    return graph


def main(argv: list[str] | None = None) -> int:
    """Run the autonomous runtime from the command line."""
    parser = argparse.ArgumentParser(prog="urms", description="Run the autonomous runtime.")
    parser.add_argument(
        "--cycles",
        type=int,
        default=DEFAULT_CYCLES,
        help="number of autonomous cycles to run",
    )
    args = parser.parse_args(argv)
    if args.cycles < 0:
        parser.error("--cycles must not be negative")
    run_autonomous(args.cycles)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())