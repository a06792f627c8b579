from aocsolutions.y2024.day03 import part1, part2

EXAMPLE1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part1_example():
    assert part1(EXAMPLE1) == 161


def test_part2_example():
    assert part2(EXAMPLE2) == 48


def test_malformed_instruction_ignored():
    assert part1("mul(2,3]") == 0


def test_part2_matches_part1_without_toggles():
    assert part2(EXAMPLE1) == part1(EXAMPLE1)


def test_dont_disables_following_products():
    assert part2("mul(2,3)don't()mul(4,5)") == part1("mul(2,3)")


def test_do_reenables_products():
    text = "don't()mul(4,5)do()mul(6,7)"
    assert part2(text) == part1("mul(6,7)")