"""Friend-of-friend suggestions over any NeighborSource."""

from contactbook.application.dto import NotFound
from contactbook.application.ports import NeighborSource
from contactbook.domain import ContactRecord


def two_hop_neighbors(graph: NeighborSource, subject: ContactRecord) -> list[ContactRecord]:
    """Return neighbors of the subject's neighbors, in order of first discovery.

    Only outgoing edges are followed at both hops, so in a directed graph
    A -> B gives B no suggestions from A's side. The subject and its direct
    neighbors are never returned.
    """
    direct = list(graph.neighbors(subject))
    excluded = {subject, *direct}
    seen: set[ContactRecord] = set()
    out: list[ContactRecord] = []
    for friend in direct:
        for candidate in graph.neighbors(friend):
            if candidate in excluded or candidate in seen:
                continue
            seen.add(candidate)
            out.append(candidate)
    return out


def suggest(graph: NeighborSource, name: str) -> list[ContactRecord] | NotFound:
    """Resolve name and return its two-hop neighbors, or NotFound."""
    subject = graph.resolve(name)
    if subject is None:
        return NotFound(name=name)
    return two_hop_neighbors(graph, subject)
