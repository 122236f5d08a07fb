import pytest

from urms.graph import Edge, Node, SemanticGraph
from urms.memory import (
    EvolutionHistory,
    MemoryRecord,
    MemoryStore,
    MemoryTrace,
    apply_decay,
    load_graph,
    load_persistent,
    persist,
    rollback,
    save_graph,
    snapshot,
    store_experience,
)


@pytest.fixture
def graph():
    return SemanticGraph(
        nodes=[Node(id=1, name="alpha"), Node(id=2, name="beta", weight=1.5)],
        edges=[Edge(1, 2)],
    )


def test_history_add_and_show(capsys):
    history = EvolutionHistory()
    history.add("grew")
    history.add("shrank")
    assert history.records == ["grew", "shrank"]
    history.show()
    assert capsys.readouterr().out.splitlines() == [
        "HISTORY ADD -> grew",
        "HISTORY ADD -> shrank",
        "===== EVOLUTION HISTORY =====",
        "grew",
        "shrank",
    ]


def test_memory_record_fields():
    record = MemoryRecord("event", 0.25, "tag")
    assert (record.event, record.weight, record.tag) == ("event", 0.25, "tag")


def test_store_and_recall(capsys):
    store = MemoryStore()
    store.store(MemoryTrace(5, "first"))
    store.store(MemoryTrace(9, "second"))
    assert [trace.id for trace in store.traces] == [5, 9]
    store.recall()
    assert capsys.readouterr().out.splitlines() == [
        "STORE MEMORY => first",
        "STORE MEMORY => second",
        "MEMORY RECALL:",
        "[5] first",
        "[9] second",
    ]


def test_apply_decay_lists_nodes(capsys, graph):
    apply_decay(graph)
    assert capsys.readouterr().out.splitlines() == [
        "Memory decay applied",
        "memory node -> alpha",
        "memory node -> beta",
    ]


def test_store_experience_shows_weights(capsys, graph):
    store_experience(graph)
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "EXPERIENCE MEMORY"
    assert lines[1] == "memory node -> alpha weight=1"
    assert lines[2] == "memory node -> beta weight=1.5"


def test_save_empty_graph(tmp_path):
    path = tmp_path / "dump.txt"
    save_graph(SemanticGraph(), path)
    assert path.read_text(encoding="utf-8") == "SemanticGraph {\n    nodes: [],\n    edges: [],\n}"


def test_save_graph_contents(tmp_path, graph):
    path = tmp_path / "dump.txt"
    save_graph(graph, path)
    text = path.read_text(encoding="utf-8")
    assert text.startswith("SemanticGraph {")
    assert text.endswith("}")
    assert 'name: "alpha",' in text
    assert "weight: 1.5," in text
    assert "from: 1," in text and "to: 2," in text
    assert text.count("Node {") == len(graph.nodes)
    assert text.count("Edge {") == len(graph.edges)


def test_save_graph_to_missing_directory_raises(tmp_path, graph):
    with pytest.raises(FileNotFoundError):
        save_graph(graph, tmp_path / "missing" / "dump.txt")


def test_load_graph_gives_none():
    assert load_graph() is None


def test_persist_reports_counts(capsys, graph):
    persist(graph)
    assert capsys.readouterr().out.splitlines() == [
        "PERSISTENT MEMORY SAVE",
        f"saved nodes={len(graph.nodes)} edges={len(graph.edges)}",
    ]


@pytest.mark.parametrize(
    "action, text",
    [
        (load_persistent, "PERSISTENT MEMORY LOAD"),
        (snapshot, "MEMORY SNAPSHOT CREATED"),
        (rollback, "ROLLBACK EXECUTED"),
    ],
)
def test_persistence_messages(capsys, action, text):
    action()
    assert capsys.readouterr().out == f"{text}\n"