"""Reactor device graph: counting paths to the output."""

OUT = "out"
REQUIRED = frozenset({"fft", "dac"})


def parse_graph(text):
    """Map each device to the list of devices its outputs lead to."""
    graph = {}
    for line in text.splitlines():
        device, sep, outputs = line.partition(": ")
        if not sep:
            raise ValueError(f"invalid device line: {line!r}")
        graph[device] = outputs.split()
    return graph


def _path_counter(graph, required):
    memo = {}
    visiting = set()

    def visit(node, seen):
        if node == OUT:
            return int(seen == required)
        key = (node, seen)
        if key in memo:
            return memo[key]
        if key in visiting:
            raise ValueError(f"device graph has a cycle through {node!r}")
        try:
            outputs = graph[node]
        except KeyError:
            raise ValueError(f"unknown device {node!r}") from None
        visiting.add(key)
        next_seen = seen | (required & {node})
        total = sum(visit(child, next_seen) for child in outputs)
        visiting.discard(key)
        memo[key] = total
        return total

    return visit


def count_paths(graph, start):
    """Number of paths from the start device's outputs to 'out'."""
    if start not in graph:
        raise ValueError(f"unknown device {start!r}")
    visit = _path_counter(graph, frozenset())
    return sum(visit(child, frozenset()) for child in graph[start])


def count_paths_via_fft_dac(graph, start):
    """Number of paths from start to 'out' that pass through both fft and dac."""
    return _path_counter(graph, REQUIRED)(start, frozenset())


def part_one(text):
    return count_paths(parse_graph(text), "you")


def part_two(text):
    return count_paths_via_fft_dac(parse_graph(text), "svr")