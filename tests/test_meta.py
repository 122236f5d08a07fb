import pytest

from urms.graph import SemanticGraph
from urms.meta import analyze_layer, inspect, predict, self_analyze, self_rewrite


def _graph(node_count, edge_pairs=()):
    graph = SemanticGraph()
    for index in range(node_count):
        graph.add_node(f"n{index}")
    for source, target in edge_pairs:
        graph.add_edge(source, target)
    return graph


def test_analyze_layer_returns_rules(capsys):
    rules = analyze_layer()
    assert rules == [
        "preserve stability",
        "increase adaptation",
        "optimize reasoning",
    ]
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "META LAYER"
    assert f"rules -> {len(rules)}" in lines
    assert lines[-1] == "meta memory -> 0"


def test_inspect_empty_graph_density_is_zero(capsys):
    assert inspect(SemanticGraph()) == 0.0
    out = capsys.readouterr().out
    assert "unstable growth" not in out
    assert out.splitlines()[-1] == "Meta observer finished"


def test_inspect_density_is_edges_per_node(capsys):
    graph = _graph(4, [(1, 2), (2, 3)])
    density = inspect(graph)
    assert density * len(graph.nodes) == pytest.approx(len(graph.edges))
    assert "unstable growth" not in capsys.readouterr().out


def test_inspect_warns_on_dense_graph(capsys):
    graph = _graph(1, [(1, 1), (1, 1)])
    capsys.readouterr()
    density = inspect(graph)
    assert density > 1.5
    assert "meta warning -> unstable growth" in capsys.readouterr().out.splitlines()


def test_predict_grows_counts():
    graph = _graph(2, [(1, 2)])
    nodes, edges = predict(graph)
    assert nodes - len(graph.nodes) == 5
    assert edges - len(graph.edges) == 8


def test_predict_reports_trend(capsys):
    predict(SemanticGraph())
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "FUTURE PREDICTOR"
    assert lines[-1] == "system trend -> expansion"


@pytest.mark.parametrize(
    "count, verdict",
    [
        (0, "weak cognition"),
        (2, "weak cognition"),
        (3, "stable cognition"),
        (9, "stable cognition"),
        (10, "expanding intelligence"),
    ],
)
def test_self_analyze_thresholds(count, verdict, capsys):
    graph = _graph(count)
    capsys.readouterr()
    assert self_analyze(graph) == verdict
    lines = capsys.readouterr().out.splitlines()
    assert f"analysis -> {verdict}" in lines
    assert f"node count -> {count}" in lines


def test_self_rewrite_output(capsys):
    self_rewrite()
    assert capsys.readouterr().out.splitlines() == ["Self rewrite executed"]