"""Battery banks: the largest joltage from picking digits in order."""

PART_TWO_DIGITS = 12


def parse_banks(text):
    """One list of digits per line."""
    return [[int(ch) for ch in line] for line in text.splitlines()]


def max_pair_joltage(bank):
    """Largest two-digit number formed by two batteries kept in order."""
    if len(bank) < 2:
        raise ValueError("a bank needs at least two batteries")
    a, b = bank[0], bank[1]
    for digit in bank[2:]:
        if b > a:
            a, b = b, digit
        elif digit > b:
            b = digit
    return a * 10 + b


def max_joltage(bank, digits):
    """Largest number formed by keeping the given count of batteries in order."""
    if not bank or digits < 1:
        raise ValueError("need a non-empty bank and at least one digit")
    chosen = list(bank[:digits])
    for digit in bank[len(chosen):]:
        for index, (current, following) in enumerate(zip(chosen, chosen[1:])):
            if current < following:
                del chosen[index]
                chosen.append(digit)
                break
        else:
            if digit > chosen[-1]:
                chosen[-1] = digit
    return int("".join(map(str, chosen)))


def part_one(text):
    return sum(max_pair_joltage(bank) for bank in parse_banks(text))


def part_two(text):
    return sum(max_joltage(bank, PART_TWO_DIGITS) for bank in parse_banks(text))