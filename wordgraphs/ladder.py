"""Word-ladder graph over five-letter words: components and shortest paths."""

from __future__ import annotations

import argparse
from collections import defaultdict, deque
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

WORD_LENGTH = 5
DEFAULT_DICTIONARY = "sgb-words.txt"


class WordNotFoundError(LookupError):
    """The word is not a vertex of the graph."""

    def __init__(self, word: str) -> None:
        super().__init__(f"Đồ thị không chứa {word}")
        self.word = word


class NoPathError(Exception):
    """No path joins the two words."""

    def __init__(self, start: str, end: str) -> None:
        super().__init__(
            f"Không tồn tại đường đi từ {start} đến {end} trong đồ thị này"
        )
        self.start = start
        self.end = end


def read_words(path: str | Path) -> list[str]:
    """Read one word per line, keeping the first five characters of each."""
    with open(path, encoding="utf-8") as handle:
        return [
            word
            for word in (line.rstrip("\r\n")[:WORD_LENGTH] for line in handle)
            if word
        ]


def are_connected(first: str, second: str) -> bool:
    """True when the words differ in exactly one of their five letters."""
    differences = sum(
        a != b for a, b in zip(first[:WORD_LENGTH], second[:WORD_LENGTH])
    )
    return differences == 1


def _patterns(word: str) -> Iterator[str]:
    for position in range(len(word)):
        yield word[:position] + "\0" + word[position + 1 :]


class WordGraph:
    """Undirected graph joining words that differ in a single letter."""

    def __init__(self, words: Iterable[str]) -> None:
        self.words: tuple[str, ...] = tuple(dict.fromkeys(words))
        position = {word: index for index, word in enumerate(self.words)}
        buckets: dict[str, list[str]] = defaultdict(list)
        for word in self.words:
            for pattern in _patterns(word):
                buckets[pattern].append(word)
        self._neighbours: dict[str, list[str]] = {word: [] for word in self.words}
        for group in buckets.values():
            for word in group:
                self._neighbours[word].extend(o for o in group if o != word)
        for neighbours in self._neighbours.values():
            neighbours.sort(key=position.__getitem__)

    def __contains__(self, word: object) -> bool:
        return word in self._neighbours

    def __len__(self) -> int:
        return len(self.words)

    def neighbours(self, word: str) -> list[str]:
        """Words one letter away from ``word``, in dictionary order."""
        try:
            return list(self._neighbours[word])
        except KeyError:
            raise WordNotFoundError(word) from None

    def isolated_words(self) -> list[str]:
        """Words that have no neighbour at all."""
        return [word for word in self.words if not self._neighbours[word]]

    def count_components(self) -> int:
        """Number of connected components holding more than one word."""
        seen: set[str] = set()
        components = 0
        for word in self.words:
            if word in seen:
                continue
            components += 1
            seen.add(word)
            stack = [word]
            while stack:
                for neighbour in self._neighbours[stack.pop()]:
                    if neighbour not in seen:
                        seen.add(neighbour)
                        stack.append(neighbour)
        return components - len(self.isolated_words())

    def shortest_path(self, start: str, end: str) -> list[str]:
        """Shortest chain of words from ``start`` to ``end``, both included."""
        for word in (start, end):
            if word not in self:
                raise WordNotFoundError(word)
        parents: dict[str, str | None] = {start: None}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if current == end:
                path = []
                node: str | None = current
                while node is not None:
                    path.append(node)
                    node = parents[node]
                path.reverse()
                return path
            for neighbour in self._neighbours[current]:
                if neighbour not in parents:
                    parents[neighbour] = current
                    queue.append(neighbour)
        raise NoPathError(start, end)


def _ask(prompt: str) -> str:
    try:
        return input(prompt)[:WORD_LENGTH]
    except EOFError:
        return ""


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wordgraphs-ladder",
        description="Count components of the word-ladder graph and find a shortest path.",
    )
    parser.add_argument("dictionary", nargs="?", default=DEFAULT_DICTIONARY)
    args = parser.parse_args(argv)

    graph = WordGraph(read_words(args.dictionary))
    print(f"Có {graph.count_components()} thành phần liên thông trong đồ thị")

    start = _ask("Chọn điểm bắt đầu: ")
    end = _ask("Chọn điểm kết thúc: ")
    missing = [word for word in (start, end) if word not in graph]
    for word in missing:
        print(WordNotFoundError(word))
    if missing:
        return 0
    try:
        path = graph.shortest_path(start, end)
    except NoPathError as error:
        print(error)
        return 0
    print(f"Đường đi ngắn nhất từ {start} đến {end} như sau")
    print(" <- ".join(reversed(path)) + " ")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())