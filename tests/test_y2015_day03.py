from aocsolutions.y2015.day03 import part1, part2, visit


def test_visit_empty_is_origin():
    assert visit("") == {(0, 0)}


def test_part1_examples():
    assert part1(">") == 2
    assert part1("^>v<") == 4


def test_part2_example():
    assert part2("^v^v^v^v^v") == 11


def test_back_and_forth_revisits():
    assert part1("^v^v") == part1("^v")


def test_unknown_characters_ignored():
    assert visit("x\n") == visit("")


def test_visit_bounded_by_moves():
    moves = "^^>>vv<<^>v<"
    visited = visit(moves)
    assert (0, 0) in visited
    assert len(visited) <= len(moves) + 1


def test_part2_covers_each_walker():
    text = "^>v<^^>"
    assert part2(text) >= part1(text[::2])
    assert part2(text) >= part1(text[1::2])