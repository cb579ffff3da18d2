import pytest

from adventsolver.y2024_day14 import find_tree, parse_security

EXAMPLE = """p=0,4 v=3,-3
p=6,3 v=-1,-3
p=10,3 v=-1,2
p=2,0 v=2,-1
p=0,0 v=1,3
p=3,0 v=-2,-2
p=7,6 v=-1,-3
p=3,0 v=-1,-2
p=9,3 v=2,3
p=7,3 v=-1,2
p=2,4 v=2,-3
p=9,5 v=-3,-3"""


def example():
    return parse_security(EXAMPLE, 11, 7)


def positions(security):
    return [(robot.row, robot.col) for robot in security.robots]


def converging_text(steps, count=11, height=103):
    lines = []
    for i in range(count):
        row = (-steps * i) % height
        lines.append(f"p={i},{row} v=0,{i}")
    return "\n".join(lines)


def test_example_safety_factor():
    security = example()
    security.simulate(100)
    assert security.safety_factor() == 12


def test_parse_reads_column_then_row():
    robot = parse_security("p=2,4 v=2,-3", 11, 7).robots[0]
    assert (robot.col, robot.row) == (2, 4)
    assert (robot.col_velocity, robot.row_velocity) == (2, -3)


def test_full_period_returns_to_start():
    security = example()
    start = positions(security)
    security.simulate(security.width * security.height)
    assert positions(security) == start


def test_simulation_is_additive():
    stepwise = example()
    stepwise.simulate(13)
    stepwise.simulate(29)
    direct = example()
    direct.simulate(42)
    assert positions(stepwise) == positions(direct)


def test_negative_velocity_wraps():
    security = parse_security("p=0,0 v=-1,-1", 11, 7)
    security.simulate(1)
    assert positions(security) == [(security.height - 1, security.width - 1)]


def test_render_shape_and_robot_total():
    security = example()
    security.simulate(100)
    lines = security.render().split("\n")
    assert len(lines) == security.height
    assert all(len(line) == security.width for line in lines)
    total = sum(int(ch) for line in lines for ch in line if ch != " ")
    assert total == len(security.robots)


def test_robots_on_middle_row_are_not_counted():
    security = parse_security("p=0,3 v=0,0\np=10,3 v=0,0", 11, 7)
    assert security.safety_factor() == 0


def test_example_has_no_tree():
    assert not example().has_tree()


def test_converging_robots_form_tree():
    steps = 3
    assert find_tree(converging_text(steps), 10) == steps


def test_tree_search_stops_at_limit():
    steps = 3
    assert find_tree(converging_text(steps), steps) is None


def test_short_run_is_not_a_tree():
    security = parse_security(converging_text(0, count=10))
    assert not security.has_tree()
    assert parse_security(converging_text(0, count=11)).has_tree()


@pytest.mark.parametrize("text", ["p=0,4", "p=0;4 v=3,-3", "p=a,4 v=3,-3"])
def test_malformed_robot_is_rejected(text):
    with pytest.raises(ValueError):
        parse_security(text)