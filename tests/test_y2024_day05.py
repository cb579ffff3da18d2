from collections import Counter

from adventsolver.y2024_day05 import (
    are_pages_ordered,
    parse_orderings,
    parse_updates,
    part_one,
    part_two,
    reorder_pages,
)

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


def test_parse_orderings_keeps_rule_order():
    assert parse_orderings(EXAMPLE)[47] == [53, 13, 61, 29]


def test_parse_updates_skips_rule_lines():
    updates = parse_updates(EXAMPLE)
    assert len(updates) == 6
    assert updates[0] == [75, 47, 61, 53, 29]


def test_part_one_example():
    assert part_one(EXAMPLE) == 143


def test_part_two_example():
    assert part_two(EXAMPLE) == 123


def test_detects_unordered_update():
    orderings = parse_orderings(EXAMPLE)
    assert are_pages_ordered([75, 47, 61, 53, 29], orderings) is True
    assert are_pages_ordered([75, 97, 47, 61, 53], orderings) is False


def test_reordered_pages_are_ordered_and_same_pages():
    orderings = parse_orderings(EXAMPLE)
    for pages in parse_updates(EXAMPLE):
        result = reorder_pages(pages, orderings)
        assert are_pages_ordered(result, orderings)
        assert Counter(result) == Counter(pages)


def test_reorder_does_not_mutate_input():
    orderings = parse_orderings(EXAMPLE)
    pages = [61, 13, 29]
    reorder_pages(pages, orderings)
    assert pages == [61, 13, 29]