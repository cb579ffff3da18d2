"""LAN party: triangles of computers and maximal cliques."""

from collections import defaultdict


def build_graph(text):
    """Undirected adjacency sets from lines like 'kh-tc'."""
    graph = defaultdict(set)
    for line in text.splitlines():
        a, sep, b = line.partition("-")
        if not sep:
            raise ValueError(f"invalid connection: {line!r}")
        graph[a].add(b)
        graph[b].add(a)
    return dict(graph)


def count_triangles_with_t(graph):
    """Triangles of connected computers where some name starts with 't'."""
    triangles = set()
    for a, a_neighbours in graph.items():
        for b in a_neighbours:
            for c in graph.get(b, ()):
                if a in graph.get(c, ()):
                    triangles.add(tuple(sorted((a, b, c))))
    return sum(any(name.startswith("t") for name in triangle) for triangle in triangles)


def maximal_cliques(graph, size):
    """Sorted comma-joined names of every maximal clique with exactly size members."""
    found = []

    def expand(clique, candidates, excluded):
        if not candidates and not excluded:
            if len(clique) == size:
                found.append(",".join(sorted(clique)))
            return
        for node in list(candidates):
            neighbours = graph[node]
            expand(clique | {node}, candidates & neighbours, excluded & neighbours)
            candidates = candidates - {node}
            excluded = excluded | {node}

    expand(set(), set(graph), set())
    return sorted(found)


def part_one(text):
    return count_triangles_with_t(build_graph(text))


def part_two(text):
    graph = build_graph(text)
    size = max((len(neighbours) for neighbours in graph.values()), default=0)
    return maximal_cliques(graph, size)