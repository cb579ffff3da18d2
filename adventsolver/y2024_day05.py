"""Print queue: page ordering rules and update validation."""

from collections import defaultdict


def parse_orderings(text):
    """Map each page to the pages that must come after it."""
    orderings = defaultdict(list)
    for line in text.splitlines():
        parts = line.split("|")
        if len(parts) < 2:
            continue
        try:
            before, after = int(parts[0]), int(parts[1])
        except ValueError:
            continue
        orderings[before].append(after)
    return dict(orderings)


def parse_updates(text):
    """Comma separated page lists; lines holding no page numbers are skipped."""
    updates = []
    for line in text.splitlines():
        pages = []
        for value in line.split(","):
            try:
                pages.append(int(value))
            except ValueError:
                continue
        if pages:
            updates.append(pages)
    return updates


def are_pages_ordered(pages, orderings):
    """True if no page appears after one that must follow it."""
    seen = set()
    for page in pages:
        if any(after in seen for after in orderings.get(page, ())):
            return False
        seen.add(page)
    return True


class _PageKey:
    """Sort key placing a page before every page its rules say must follow."""

    __slots__ = ("page", "rules")

    def __init__(self, page, rules):
        self.page = page
        self.rules = rules

    def __lt__(self, other):
        followers = self.rules.get(self.page, frozenset())
        return other.page in followers


def reorder_pages(pages, orderings):
    """The pages sorted so that the ordering rules hold."""
    rules = {page: set(after) for page, after in orderings.items()}
    return sorted(pages, key=lambda page: _PageKey(page, rules))


def _middle(pages):
    return pages[(len(pages) - 1) // 2]


def part_one(text):
    orderings = parse_orderings(text)
    return sum(
        _middle(pages)
        for pages in parse_updates(text)
        if are_pages_ordered(pages, orderings)
    )


def part_two(text):
    orderings = parse_orderings(text)
    return sum(
        _middle(reorder_pages(pages, orderings))
        for pages in parse_updates(text)
        if not are_pages_ordered(pages, orderings)
    )