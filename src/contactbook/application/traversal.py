"""Breadth-first and depth-first traversal over any NeighborSource.

Both functions resolve the start eagerly and return NotFound right away;
otherwise they return a generator that walks the current neighbor relation
lazily and visits each reachable contact once.
"""

from collections import deque
from collections.abc import Iterator

from contactbook.application.dto import NotFound
from contactbook.application.ports import NeighborSource
from contactbook.domain import ContactRecord


def bfs(graph: NeighborSource, name: str) -> Iterator[ContactRecord] | NotFound:
    start = graph.resolve(name)
    if start is None:
        return NotFound(name=name)
    return _breadth_first(graph, start)


def dfs(graph: NeighborSource, name: str) -> Iterator[ContactRecord] | NotFound:
    start = graph.resolve(name)
    if start is None:
        return NotFound(name=name)
    return _depth_first(graph, start)


def _breadth_first(graph: NeighborSource, start: ContactRecord) -> Iterator[ContactRecord]:
    visited = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        yield current
        for neighbor in graph.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)


def _depth_first(graph: NeighborSource, start: ContactRecord) -> Iterator[ContactRecord]:
    """Pre-order walk. An explicit stack of neighbor iterators replaces recursion."""
    visited = {start}
    yield start
    stack = [iter(graph.neighbors(start))]
    while stack:
        for neighbor in stack[-1]:
            if neighbor not in visited:
                visited.add(neighbor)
                yield neighbor
                stack.append(iter(graph.neighbors(neighbor)))
                break
        else:
            stack.pop()
