# urms

A small runtime built around a semantic graph of named nodes and directed
edges. Stages grow, inspect and adjust the graph. Evolution and mutation add
nodes. Reflection and meta observation report on its shape. Reasoning raises
node weights. Pruning keeps the graph bounded. Each stage reports what it does
on standard output.

## Installing

```
pip install .
```

Python 3.10 or later is required. The package has no runtime dependencies.

## Running the autonomous runtime

```
urms
urms --cycles 3
```

This seeds a two-node graph (`SemanticEngine` → `ReflectiveSemanticEngine`)
and dispatches a `SystemOverload` event. It then runs the autonomous cycles:
five by default, or the number given with `--cycles`, which must not be
negative. Each cycle prints the runtime-loop, evolution, history, query, truth,
activation, reflection and graph-state reports. The same runner can be called
from code as `urms.runtime.run_autonomous(cycles)`, which returns the graph.

## Using the library

```python
from urms.graph import SemanticGraph, print_graph_state
from urms.evolution import evolve, decide
from urms.meta import self_analyze
from urms.analysis import think, reflect, prune

graph = SemanticGraph()
first = graph.add_node("SemanticEngine")
second = graph.add_node("ReflectiveSemanticEngine")
graph.add_edge(first, second)

evolve(graph)          # adds an "evolved" node linked to the previous one
think(graph)           # raises every node's weight by 0.05
reflect(graph)         # prints counts, returns the average weight
self_analyze(graph)    # returns "weak cognition", "stable cognition" or "expanding intelligence"
prune(graph, 32)       # drops the oldest nodes beyond 32, returns how many
print_graph_state(graph)

print(decide("memory overflow"))  # CompressedMemoryEngine
```

The modules:

- `urms.graph`: `Node`, `Edge`, `Relation`, `Symbol`, `SemanticGraph` and `print_graph_state`.
- `urms.events`: `RuntimeEvent` and `dispatch`.
- `urms.cognition`: `CognitiveState` with energy, entropy, focus, stability and recursion depth, advanced by `evolve()`.
- `urms.goals`: `Goal` and `initialize_goals`, which adds a goal node with id 100 linked from node 1.
- `urms.ontology`: `OntologyEntity`, `EntityType`, `OntologyStore` and `analyze_entity`.
- `urms.memory`: `EvolutionHistory`, `MemoryRecord`, `MemoryTrace`, `MemoryStore`, `apply_decay`, `store_experience`, and graph dumps with `save_graph` and `load_graph`.
- `urms.evolution`: `evolve`, `meta_evolve`, `mutate`, `boost_activation`, `decide`, `record_history` and the reporting passes `adaptive_evolve`, `meta_mutate` and `self_evolve`.
- `urms.meta`: `analyze_layer`, `inspect` (edge density), `predict`, `self_analyze` and `self_rewrite`.
- `urms.interpretation`: `SemanticSymbol`, which round-trips through JSON with `to_json` and `from_json`, `ObservationEvent`, `interpret`, `interpret_semantic`, `interpret_observation` and `emit_observation`.
- `urms.analysis`: `propagate_activation`, `detect_contradictions` (self-loop edges), `query`, `reflect`, `reflect_nodes`, `think`, `recurse`, `rewrite`, `validate_truth`, `validate_graph`, `save_history`, `prune`, and the `Contradiction`, `RewriteRule` and `Rule` records.
- `urms.runtime`: `EventQueue`, `QueuedEvent`, `RuntimeState`, `run_engine`, `process_events`, `run_loop`, `schedule`, `run_autonomous` and the `main` entry point.

## Saving a graph

`save_graph(graph, path)` writes a readable text dump of the nodes and edges.
The default path is `memory_dump.txt`. `load_graph()` reads that default file
from the current directory and rebuilds the graph. It returns `None` when the
file does not exist and raises `ValueError` when the dump is malformed.

## What it does not do

- `persist`, `load_persistent`, `snapshot` and `rollback` in `urms.memory` only
  report on standard output. They store and restore nothing. The only real
  storage is the `save_graph` / `load_graph` dump.
- The autonomous runtime does not change its graph across cycles. Its cycles
  report on the seeded graph as it is.

## Running the tests

```
pip install ".[test]"
pytest
```