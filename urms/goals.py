"""Goals and the goal node seeded into a graph."""

from __future__ import annotations

from dataclasses import dataclass

from urms.graph import Edge, Node, SemanticGraph

GOAL_NODE_ID = 100
_GOAL_ANCHOR_ID = 1


@dataclass
class Goal:
    """A named objective with a priority and a reward."""

    name: str
    priority: float
    reward: float


def initialize_goals(graph: SemanticGraph) -> None:
    """Add the goal node to the graph and link the first node to it."""
    graph.nodes.append(Node(id=GOAL_NODE_ID, name="Goal", activation=1.0, weight=1.0))
    graph.edges.append(Edge(_GOAL_ANCHOR_ID, GOAL_NODE_ID))
    print("Goal system initialized")