# wordgraphs

Three small graph-search puzzles, each available as a command and as a
Python module. The commands print their messages in Vietnamese.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The water jugs (`wordgraphs.jugs`)

Three jugs hold at most 10, 7 and 4 units of water. They start out holding
0, 7 and 4. A move pours one jug into another until the source is empty or
the destination is full; pours into a full jug and pours that lead back to
an already visited state are skipped. A depth-first search explores the
moves and stops right after reaching a state where the 7-unit or the 4-unit
jug holds exactly 2 units.

```
wordgraphs-jugs
```

prints every edge of the search tree, parent then child, one per line, in
the form

```
_0_7_4_ -> _10_1_0_
```

From Python:

- `explore(root)` yields the edges of the search as `(parent, child)` tuples;
  `root` defaults to `(0, 7, 4)`.
- `valid_moves(state, visited)` lists the unvisited states reachable by one
  pour from any non-empty jug, and `pour_moves(state, source, visited)` those
  reachable by pouring from jug `source`.
- `is_finished(state)` tests the goal.
- `format_step(parent, child)` renders one edge as shown above.

## Word ladders (`wordgraphs.ladder`)

Words become the vertices of an undirected graph; two words are joined when
they differ in exactly one of their first five letters
(`are_connected(first, second)`).

```
wordgraphs-ladder [DICTIONARY]
```

reads the word list `DICTIONARY` (default: `sgb-words.txt` in the current
directory; one word per line, only the first five characters of each line
are kept, blank lines are skipped), prints how many connected components
with more than one word the graph has, then asks for a start word and an end
word and prints the shortest ladder between them, from the end word back to
the start word (`end <- ... <- start`). If a word is not in the graph, or no
ladder joins the two words, it says so instead.

```python
from wordgraphs.ladder import WordGraph, read_words

graph = WordGraph(["words", "wards", "warts", "parts"])
graph.count_components()               # 1
graph.shortest_path("words", "parts")  # ['words', 'wards', 'warts', 'parts']
```

- `read_words(path)` reads a word list the way the command does.
- `WordGraph(words)` builds the graph; duplicate words are kept once, in
  their first position. `word in graph` and `len(graph)` work as expected.
- `WordGraph.neighbours(word)` lists the words one letter away, in word-list
  order, and `WordGraph.isolated_words()` lists the words with no neighbours.
- `WordGraph.count_components()` counts connected components, leaving out
  single isolated words.
- `WordGraph.shortest_path(start, end)` returns the shortest chain of words,
  both ends included.

Asking for a word that is not in the graph raises `WordNotFoundError`; when
the two words are not linked, `shortest_path` raises `NoPathError`.

## Strongly connected word groups (`wordgraphs.scc`)

Here the graph is directed: there is an edge from one word to a different
word when the last four of its five letters all appear in the other word,
counted with multiplicity (`is_connected_to(word, dest)`).

```
wordgraphs-scc [DICTIONARY]
```

reads the word list as `wordgraphs-ladder` does, prints the number of groups
found by a Kosaraju-style two-pass depth-first search, asks for a word and
lists the other words in its group, and finally asks for a start and an end
word and prints the shortest directed path between them, end word first.

```python
from wordgraphs.scc import DirectedWordGraph

graph = DirectedWordGraph(words)
graph.kosaraju()              # {word: root word of its group, ...}
graph.component_count()
graph.group_members("words")
graph.shortest_path("words", "sword")
```

- `DirectedWordGraph.neighbours(word)` and
  `DirectedWordGraph.predecessors(word)` give the outgoing and incoming
  edges of a word, in word-list order.
- `DirectedWordGraph.kosaraju()` assigns words to groups and returns a
  mapping from each grouped word to the word that roots its group. The first
  pass stacks words in depth-first entry order; the second pass walks the
  reversed edges from the top of the stack, and a word that no other word
  points to starts no group.
- `DirectedWordGraph.component_count()` is the number of those groups, and
  `DirectedWordGraph.group_of(word)` names the root of a word's group, or
  `None`. `DirectedWordGraph.group_members(word)` lists the other words in
  the same group. These run `kosaraju()` first if it has not been run.
- `DirectedWordGraph.shortest_path(start, end)` follows the directed edges
  and raises `NoPathError` when there is no path.

Unknown words raise `WordNotFoundError`, as in `wordgraphs.ladder`.

## What is not included

The package ships no word list. The `wordgraphs-ladder` and `wordgraphs-scc`
commands need one, given on the command line or present as `sgb-words.txt`
in the current directory.