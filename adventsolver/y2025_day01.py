"""Safe dial: counting how often a rotating dial points at zero."""

DIAL_SIZE = 100
START_POSITION = 50


def parse_rotations(text):
    """Signed step counts: negative for 'L' rotations, positive otherwise."""
    rotations = []
    for line in text.splitlines():
        direction, steps_text = line[:1], line[1:]
        steps = int(steps_text)
        if steps < 0:
            raise ValueError(f"negative rotation: {line!r}")
        rotations.append(-steps if direction == "L" else steps)
    return rotations


def count_zero_stops(rotations):
    """Number of rotations that leave the dial at zero."""
    position = START_POSITION
    count = 0
    for delta in rotations:
        position = (position + delta) % DIAL_SIZE
        count += position == 0
    return count


def count_zero_clicks(rotations):
    """Number of times the dial passes or lands on zero during all rotations."""
    position = START_POSITION
    count = 0
    for delta in rotations:
        full_turns, remaining = divmod(abs(delta), DIAL_SIZE)
        count += full_turns
        if delta < 0:
            raw = position - remaining
            new_position = raw + DIAL_SIZE if raw < 0 else raw
            if raw < 0 and position > 0:
                count += 1
            if new_position == 0 and position != 0:
                count += 1
        else:
            raw = position + remaining
            new_position = raw - DIAL_SIZE if raw >= DIAL_SIZE else raw
            if raw >= DIAL_SIZE:
                count += 1
        position = new_position
    return count


def part_one(text):
    return count_zero_stops(parse_rotations(text))


def part_two(text):
    return count_zero_clicks(parse_rotations(text))