"""Lock and key schematics: counting pairs that fit without overlap."""

LOCK_TOP = "#####"
PIN_COUNT = 5
MAX_HEIGHT = 5


def _heights(block):
    counts = [0] * PIN_COUNT
    for line in block:
        for index, ch in enumerate(line):
            if ch == "#":
                if index >= PIN_COUNT:
                    raise ValueError(f"schematic line too wide: {line!r}")
                counts[index] += 1
    if any(count == 0 for count in counts):
        raise ValueError("every schematic column needs a base row")
    return tuple(count - 1 for count in counts)


def parse_schematics(text):
    """Split blank-line separated schematics into lock and key heights."""
    blocks = [[]]
    for line in text.splitlines():
        if line:
            blocks[-1].append(line)
        else:
            blocks.append([])
    locks, keys = [], []
    for block in blocks:
        heights = _heights(block)
        if block and block[0] == LOCK_TOP:
            locks.append(heights)
        else:
            keys.append(heights)
    return locks, keys


def count_fitting_pairs(locks, keys):
    """Number of lock/key pairs whose heights never exceed the space."""
    return sum(
        all(lock_height + key_height <= MAX_HEIGHT for lock_height, key_height in zip(lock, key))
        for lock in locks
        for key in keys
    )


def part_one(text):
    return count_fitting_pairs(*parse_schematics(text))