"""Reindeer maze: lowest score and tiles lying on any best path."""

import heapq

ROTATION_COST = 1000
FORWARD_COST = 1

EAST = (0, 1)
WEST = (0, -1)
SOUTH = (1, 0)
NORTH = (-1, 0)

_CLOCKWISE = {NORTH: EAST, EAST: SOUTH, SOUTH: WEST, WEST: NORTH}
_COUNTERCLOCKWISE = {value: key for key, value in _CLOCKWISE.items()}


def _step(position, direction):
    return (position[0] + direction[0], position[1] + direction[1])


def parse_maze(text):
    """The maze as a list of row strings."""
    return text.splitlines()


def find_start_end(maze):
    """Start is at the bottom-left corner, end at the top-right corner."""
    if len(maze) < 3 or len(maze[0]) < 3:
        raise ValueError("maze is too small")
    return (len(maze) - 2, 1), (1, len(maze[0]) - 2)


def lowest_scores(maze, start):
    """Lowest score to reach each (position, direction), starting facing east."""
    heap = [(0, start, EAST)]
    scores = {}
    while heap:
        score, position, direction = heapq.heappop(heap)
        if (position, direction) in scores:
            continue
        scores[(position, direction)] = score

        forward = _step(position, direction)
        if maze[forward[0]][forward[1]] != "#":
            heapq.heappush(heap, (score + FORWARD_COST, forward, direction))
        heapq.heappush(heap, (score + ROTATION_COST, position, _CLOCKWISE[direction]))
        heapq.heappush(heap, (score + ROTATION_COST, position, _COUNTERCLOCKWISE[direction]))
    return scores


def best_score(scores, position):
    """The (direction, score) with the lowest score at a position."""
    found = [
        (direction, scores[(position, direction)])
        for direction in (EAST, NORTH, SOUTH, WEST)
        if (position, direction) in scores
    ]
    if not found:
        raise ValueError(f"position {position} was never reached")
    return min(found, key=lambda item: item[1])


def _rotations(source, target):
    counts = []
    for rotate in (_CLOCKWISE, _COUNTERCLOCKWISE):
        current, count = source, 0
        while current != target:
            current = rotate[current]
            count += 1
        counts.append(count)
    return min(counts)


def best_path_tiles(scores, end):
    """All tiles that lie on at least one lowest-score path to the end."""
    tiles = set()
    queue = {(end, best_score(scores, end))}
    while queue:
        next_queue = set()
        for tile, (direction, score) in queue:
            tiles.add(tile)
            opposite = _CLOCKWISE[_CLOCKWISE[direction]]
            predecessor = _step(tile, opposite)
            for entry in (NORTH, SOUTH, EAST, WEST):
                entry_score = scores.get((predecessor, entry))
                if entry_score is None:
                    continue
                cost = _rotations(entry, direction) * ROTATION_COST + FORWARD_COST
                if entry_score + cost == score:
                    next_queue.add((predecessor, (entry, entry_score)))
        queue = next_queue
    return tiles


def part_one(text):
    maze = parse_maze(text)
    start, end = find_start_end(maze)
    return best_score(lowest_scores(maze, start), end)[1]


def part_two(text):
    maze = parse_maze(text)
    start, end = find_start_end(maze)
    return len(best_path_tiles(lowest_scores(maze, start), end))