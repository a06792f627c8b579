from aocsolutions.y2015.day17 import num_combos, part1, part2

EXAMPLE = "20\n15\n10\n5\n5"


def test_part1_example():
    assert part1(EXAMPLE, 25) == 4


def test_part2_example():
    assert part2(EXAMPLE, 25) == 3


def test_num_combos_duplicates_count_separately():
    assert num_combos([5, 5], 1, 5) == 2


def test_impossible_target():
    assert part2(EXAMPLE, 1000) == part1(EXAMPLE, 1000) == num_combos([20, 15], 2, 1000)


def test_default_target():
    assert part1("150\n100\n50") == part1("150\n100\n50", 150)
    assert part2("150\n100\n50") == part2("150\n100\n50", 150)


def test_part2_not_more_than_part1():
    assert part2(EXAMPLE, 30) <= part1(EXAMPLE, 30)