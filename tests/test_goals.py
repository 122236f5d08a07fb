from urms.goals import Goal, initialize_goals
from urms.graph import Edge, SemanticGraph


def test_goal_fields():
    goal = Goal("learn", 0.5, 2.0)
    assert (goal.name, goal.priority, goal.reward) == ("learn", 0.5, 2.0)


def test_initialize_goals_adds_goal_node():
    graph = SemanticGraph()
    graph.add_node("first")
    initialize_goals(graph)
    goal = graph.nodes[-1]
    assert goal.id == 100
    assert goal.name == "Goal"
    assert goal.activation == 1.0
    assert goal.weight == 1.0


def test_initialize_goals_links_first_node():
    graph = SemanticGraph()
    initialize_goals(graph)
    assert graph.edges == [Edge(1, 100)]


def test_initialize_goals_prints(capsys):
    initialize_goals(SemanticGraph())
    assert capsys.readouterr().out == "Goal system initialized\n"