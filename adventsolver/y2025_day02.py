"""Gift shop product ids: finding ids made of a repeated digit sequence."""


def parse_ranges(text):
    """Inclusive (low, high) ranges from the last line, comma separated."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("no id ranges in input")
    ranges = []
    for part in lines[-1].split(","):
        low, sep, high = part.partition("-")
        if not sep:
            raise ValueError(f"invalid id range: {part!r}")
        ranges.append((int(low), int(high)))
    return ranges


def is_doubled(n):
    """True if the id is some digit sequence written exactly twice."""
    if n < 1:
        raise ValueError("ids must be positive")
    digits = str(n)
    half, odd = divmod(len(digits), 2)
    return not odd and digits[:half] == digits[half:]


def is_repeated(n):
    """True if the id is some digit sequence written at least twice."""
    digits = str(n)
    return any(
        len(digits) % size == 0 and digits[:size] * (len(digits) // size) == digits
        for size in range(1, len(digits) // 2 + 1)
    )


def _ids(ranges):
    for low, high in ranges:
        yield from range(low, high + 1)


def part_one(text):
    return sum(n for n in _ids(parse_ranges(text)) if is_doubled(n))


def part_two(text):
    return sum(n for n in _ids(parse_ranges(text)) if is_repeated(n))