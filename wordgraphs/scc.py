"""Directed word graph: strongly connected groups and shortest paths.

A word points to another when its last four letters, taken as a multiset,
all occur in the other word.
"""

from __future__ import annotations

import argparse
from collections import Counter, defaultdict, deque
from collections.abc import Iterable, Iterator, Mapping, Sequence
from itertools import combinations

from wordgraphs.ladder import (
    DEFAULT_DICTIONARY,
    WORD_LENGTH,
    NoPathError,
    WordNotFoundError,
    read_words,
)

_TAIL_LENGTH = WORD_LENGTH - 1
_TARGET_LIMIT = 9


def is_connected_to(word: str, dest: str) -> bool:
    """True when the letters of ``word`` after the first all occur in ``dest``.

    Repeated letters must occur as often in ``dest``; a word never points to
    itself.
    """
    if word[:WORD_LENGTH] == dest[:WORD_LENGTH]:
        return False
    tail = word[1:WORD_LENGTH]
    if len(tail) < _TAIL_LENGTH:
        return False
    return not Counter(tail) - Counter(dest[:_TARGET_LIMIT])


def _tail_key(word: str) -> str | None:
    tail = word[1:WORD_LENGTH]
    if len(tail) < _TAIL_LENGTH:
        return None
    return "".join(sorted(tail))


def _subset_keys(dest: str) -> set[str]:
    return {
        "".join(sorted(letters))
        for letters in combinations(dest[:_TARGET_LIMIT], _TAIL_LENGTH)
    }


def _preorder(
    start: str, adjacency: Mapping[str, list[str]], visited: set[str]
) -> Iterator[str]:
    """Depth-first walk yielding each newly visited word on entry."""
    if start in visited:
        return
    visited.add(start)
    yield start
    stack = [iter(adjacency[start])]
    while stack:
        for following in stack[-1]:
            if following not in visited:
                visited.add(following)
                yield following
                stack.append(iter(adjacency[following]))
                break
        else:
            stack.pop()


class DirectedWordGraph:
    """Directed graph over words, with edges given by :func:`is_connected_to`."""

    def __init__(self, words: Iterable[str]) -> None:
        self.words: tuple[str, ...] = tuple(dict.fromkeys(words))
        by_subset: dict[str, list[str]] = defaultdict(list)
        for dest in self.words:
            for key in _subset_keys(dest):
                by_subset[key].append(dest)
        self._out: dict[str, list[str]] = {}
        for word in self.words:
            key = _tail_key(word)
            candidates = by_subset.get(key, []) if key is not None else []
            self._out[word] = [
                dest
                for dest in candidates
                if dest != word and is_connected_to(word, dest)
            ]
        self._in: dict[str, list[str]] = {word: [] for word in self.words}
        for word in self.words:
            for dest in self._out[word]:
                self._in[dest].append(word)
        self._groups: dict[str, str] | None = None

    def __contains__(self, word: object) -> bool:
        return word in self._out

    def __len__(self) -> int:
        return len(self.words)

    def _require(self, word: str) -> None:
        if word not in self._out:
            raise WordNotFoundError(word)

    def neighbours(self, word: str) -> list[str]:
        """Words that ``word`` points to, in dictionary order."""
        self._require(word)
        return list(self._out[word])

    def predecessors(self, word: str) -> list[str]:
        """Words that point to ``word``, in dictionary order."""
        self._require(word)
        return list(self._in[word])

    def kosaraju(self) -> dict[str, str]:
        """Assign words to strongly connected groups.

        Returns a mapping from each grouped word to the word that roots its
        group. Words are stacked in depth-first entry order; a stacked word
        with no predecessors starts no group.
        """
        visited: set[str] = set()
        order: list[str] = []
        for word in self.words:
            order.extend(_preorder(word, self._out, visited))

        visited = set()
        groups: dict[str, str] = {}
        while order:
            root = order.pop()
            if root in visited or not self._in[root]:
                continue
            for member in _preorder(root, self._in, visited):
                groups[member] = root
        self._groups = groups
        return dict(groups)

    def _ensure_groups(self) -> dict[str, str]:
        if self._groups is None:
            self.kosaraju()
        assert self._groups is not None
        return self._groups

    def component_count(self) -> int:
        """Number of strongly connected groups found by :meth:`kosaraju`."""
        return len(set(self._ensure_groups().values()))

    def group_of(self, word: str) -> str | None:
        """Root word of the group holding ``word``, or None if it has none."""
        self._require(word)
        return self._ensure_groups().get(word)

    def group_members(self, word: str) -> list[str]:
        """Other words in the same group as ``word``, in dictionary order."""
        root = self.group_of(word)
        if root is None:
            return []
        groups = self._ensure_groups()
        return [
            other
            for other in self.words
            if other != word and groups.get(other) == root
        ]

    def shortest_path(self, start: str, end: str) -> list[str]:
        """Shortest directed chain from ``start`` to ``end``, both included."""
        for word in (start, end):
            self._require(word)
        parents: dict[str, str | None] = {start: None}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if current == end:
                path: list[str] = []
                node: str | None = current
                while node is not None:
                    path.append(node)
                    node = parents[node]
                path.reverse()
                return path
            for following in self._out[current]:
                if following not in parents:
                    parents[following] = current
                    queue.append(following)
        raise NoPathError(start, end)


def _ask(prompt: str) -> str:
    try:
        return input(prompt)[:WORD_LENGTH]
    except EOFError:
        return ""


def _report_group(graph: DirectedWordGraph, word: str) -> None:
    if word not in graph:
        print(WordNotFoundError(word))
        return
    members = graph.group_members(word)
    if not members:
        print(f"Từ {word} không nằm trong thành phần liên thông mạnh nào cả")
        return
    print(f"Các từ cùng thành phần liên thông mạnh với {word} là:")
    for member in members:
        print(member)


def _report_path(graph: DirectedWordGraph, start: str, end: str) -> None:
    missing = [word for word in (start, end) if word not in graph]
    for word in missing:
        print(WordNotFoundError(word))
    if missing:
        return
    try:
        path = graph.shortest_path(start, end)
    except NoPathError as error:
        print(error)
        return
    print(f"Đường đi ngắn nhất từ {start} đến {end} như sau")
    print(" <- ".join(reversed(path)) + " ")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wordgraphs-scc",
        description=(
            "Count strongly connected groups of the directed word graph, "
            "list a word's group and find a shortest path."
        ),
    )
    parser.add_argument("dictionary", nargs="?", default=DEFAULT_DICTIONARY)
    args = parser.parse_args(argv)

    graph = DirectedWordGraph(read_words(args.dictionary))
    graph.kosaraju()
    print(
        f"Số thành phần liên thông mạnh có trong đồ thị là {graph.component_count()}"
    )

    _report_group(graph, _ask("Nhập từ cần tìm thành phần liên thông mạnh: "))

    start = _ask("Chọn điểm bắt đầu: ")
    end = _ask("Chọn điểm kết thúc: ")
    _report_path(graph, start, end)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())