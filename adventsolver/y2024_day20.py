"""Race condition: counting wall-clipping cheats that save enough time."""

import heapq

DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))
MIN_SAVE_FOR_QUALIFIED_CHEAT = 100
PART_ONE_CHEAT_DISTANCE = 2
PART_TWO_CHEAT_DISTANCE = 20


class RaceTrack:
    """A grid of track (True) and wall (False) cells with start and end."""

    def __init__(self, track, start, end):
        self.track = [list(row) for row in track]
        if not self.track:
            raise ValueError("racetrack has no rows")
        self.start = start
        self.end = end
        self.rows = len(self.track)
        self.cols = len(self.track[0])

    def _is_track(self, position):
        r, c = position
        return 0 <= r < self.rows and 0 <= c < self.cols and self.track[r][c]

    def distances(self, source, target):
        """Distances from source, searched until target is reached."""
        heap = [(0, -source[0], -source[1])]
        found = {}
        while heap:
            distance, neg_row, neg_col = heapq.heappop(heap)
            position = (-neg_row, -neg_col)
            if position in found:
                continue
            found[position] = distance
            if position == target:
                return found
            for dr, dc in DIRECTIONS:
                step = (position[0] + dr, position[1] + dc)
                if self._is_track(step):
                    heapq.heappush(heap, (distance + 1, -step[0], -step[1]))
        raise ValueError("failed to reach the end")

    def _within(self, position, max_distance):
        row, col = position
        for r in range(max(0, row - max_distance), min(row + max_distance, self.rows - 1) + 1):
            for c in range(max(0, col - max_distance), min(col + max_distance, self.cols - 1) + 1):
                if not self.track[r][c]:
                    continue
                distance = abs(r - row) + abs(c - col)
                if distance <= max_distance:
                    yield (r, c), distance

    def count_cheats(self, cheat_distance, min_save):
        """Cheats of at most cheat_distance steps that save at least min_save."""
        from_start = self.distances(self.start, self.end)
        from_end = self.distances(self.end, self.start)
        shortest = from_start[self.end]
        count = 0
        for r in range(1, self.rows - 1):
            for c in range(1, self.cols - 1):
                start_distance = from_start.get((r, c))
                if start_distance is None or not self.track[r][c]:
                    continue
                for target, distance in self._within((r, c), cheat_distance):
                    end_distance = from_end.get(target)
                    if end_distance is None:
                        continue
                    total = start_distance + distance + end_distance
                    if total < shortest and shortest - total >= min_save:
                        count += 1
        return count


def parse_racetrack(text):
    track = []
    start = end = None
    for r, line in enumerate(text.splitlines()):
        row = []
        for c, ch in enumerate(line):
            if ch == "#":
                row.append(False)
                continue
            if ch == "S":
                start = (r, c)
            elif ch == "E":
                end = (r, c)
            elif ch != ".":
                raise ValueError(f"unexpected cell character {ch!r}")
            row.append(True)
        track.append(row)
    if start is None or end is None:
        raise ValueError("racetrack needs a start and an end")
    return RaceTrack(track, start, end)


def part_one(text, min_save=MIN_SAVE_FOR_QUALIFIED_CHEAT):
    return parse_racetrack(text).count_cheats(PART_ONE_CHEAT_DISTANCE, min_save)


def part_two(text, min_save=MIN_SAVE_FOR_QUALIFIED_CHEAT):
    return parse_racetrack(text).count_cheats(PART_TWO_CHEAT_DISTANCE, min_save)