"""Depth-first exploration of the three-jug pouring puzzle."""

from __future__ import annotations

import argparse
from collections.abc import Collection, Iterator, Sequence

State = tuple[int, int, int]

CAPACITY: State = (10, 7, 4)
START: State = (0, 7, 4)
TARGET = 2


def is_finished(state: Sequence[int]) -> bool:
    """Return True when the 7- or the 4-litre jug holds exactly two litres."""
    return state[1] == TARGET or state[2] == TARGET


def pour_moves(
    state: Sequence[int], source: int, visited: Collection[State]
) -> list[State]:
    """States reachable by pouring from jug ``source`` into each other jug.

    A pour stops when the source is empty or the destination is full. Pours
    into a full jug and pours that lead to a visited state are left out.
    """
    moves: list[State] = []
    for target, capacity in enumerate(CAPACITY):
        if target == source or state[target] == capacity:
            continue
        amount = min(capacity - state[target], state[source])
        contents = list(state)
        contents[target] += amount
        contents[source] -= amount
        move: State = (contents[0], contents[1], contents[2])
        if move not in visited:
            moves.append(move)
    return moves


def valid_moves(state: Sequence[int], visited: Collection[State]) -> list[State]:
    """All unvisited states reachable by one pour from a non-empty jug."""
    return [
        move
        for source, amount in enumerate(state)
        if amount != 0
        for move in pour_moves(state, source, visited)
    ]


def _walk(parent: State, visited: set[State]):
    for child in valid_moves(parent, visited):
        visited.add(child)
        yield parent, child
        if is_finished(child):
            return True
        if (yield from _walk(child, visited)):
            return True
    return False


def explore(root: State = START) -> Iterator[tuple[State, State]]:
    """Yield the edges of the depth-first tree as ``(parent, child)`` pairs.

    The moves of a state are fixed when the state is entered; the walk stops
    right after the first edge whose child is a finishing state.
    """
    start: State = (root[0], root[1], root[2])
    yield from _walk(start, {start})


def format_step(parent: Sequence[int], child: Sequence[int]) -> str:
    """Render one tree edge as ``_a_b_c_ -> _d_e_f_``."""
    left = "_" + "_".join(str(amount) for amount in parent) + "_"
    right = "_" + "_".join(str(amount) for amount in child) + "_"
    return f"{left} -> {right}"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wordgraphs-jugs",
        description="Print the depth-first tree of the 10/7/4 jug puzzle.",
    )
    parser.parse_args(argv)
    for parent, child in explore(START):
        print(format_step(parent, child))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())