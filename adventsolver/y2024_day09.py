"""Disk map compaction and filesystem checksum."""

from dataclasses import dataclass, field

_DIGITS = frozenset("0123456789")


@dataclass
class MovedFile:
    """A run of blocks of file ``id`` moved into another part's free space."""

    id: int
    number: int


@dataclass
class DiskPart:
    """One file of the disk map followed by its free space.

    When file blocks are moved away they leave ``file_free_space_blocks``
    in front of what remains; moved-in blocks sit between the file and the
    remaining free space.
    """

    file_blocks: int
    free_space_blocks: int
    file_free_space_blocks: int = 0
    moved_here: list = field(default_factory=list)


def parse_disk(text):
    """Read the dense disk map into file/free-space parts."""
    digits = "".join(text.splitlines()) + "0"
    if not set(digits) <= _DIGITS:
        raise ValueError("disk map may only hold decimal digits")
    if len(digits) % 2:
        raise ValueError("disk map must hold an odd number of digits")
    return [
        DiskPart(int(file_digit), int(free_digit))
        for file_digit, free_digit in zip(digits[::2], digits[1::2])
    ]


def compute_checksum(parts):
    """Sum of block position times file id over every occupied block."""
    position = 0
    checksum = 0
    for file_id, part in enumerate(parts):
        position += part.file_free_space_blocks
        runs = [(file_id, part.file_blocks)]
        runs.extend((moved.id, moved.number) for moved in part.moved_here)
        for run_id, count in runs:
            checksum += run_id * sum(range(position, position + count))
            position += count
        position += part.free_space_blocks
    return checksum


def compact_blocks(parts):
    """Move file blocks one at a time into the leftmost free space.

    The parts are rearranged in place and returned.
    """
    candidate = 0
    to_move = len(parts) - 1
    while candidate < to_move:
        target = parts[candidate]
        source = parts[to_move]
        if target.free_space_blocks >= source.file_blocks:
            count = source.file_blocks
            target.free_space_blocks -= count
            target.moved_here.append(MovedFile(to_move, count))
            source.file_blocks = 0
            to_move -= 1
            if target.free_space_blocks == 0:
                candidate += 1
        else:
            count = target.free_space_blocks
            target.free_space_blocks = 0
            target.moved_here.append(MovedFile(to_move, count))
            source.file_blocks -= count
            candidate += 1
    return parts


def compact_files(parts):
    """Move whole files, highest id first, into the leftmost span that fits.

    The parts are rearranged in place and returned.
    """
    for to_move in range(len(parts) - 1, 0, -1):
        source = parts[to_move]
        for target in parts[:to_move]:
            count = source.file_blocks
            if count > 0 and target.free_space_blocks >= count:
                target.moved_here.append(MovedFile(to_move, count))
                target.free_space_blocks -= count
                source.file_free_space_blocks += count
                source.file_blocks = 0
                break
    return parts


def part_one(text):
    return compute_checksum(compact_blocks(parse_disk(text)))


def part_two(text):
    return compute_checksum(compact_files(parse_disk(text)))