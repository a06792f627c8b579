import pytest

from aocsolutions.y2015.day06 import Command, Instruction, parse_input, part1, part2


def test_parse_input():
    text = "turn on 0,0 through 2,2\ntoggle 5,6 through 7,8\nturn off 1,1 through 1,1"
    assert parse_input(text) == [
        Instruction(Command.TURN_ON, 0, 0, 2, 2),
        Instruction(Command.TOGGLE, 5, 6, 7, 8),
        Instruction(Command.TURN_OFF, 1, 1, 1, 1),
    ]


def test_parse_invalid_command():
    with pytest.raises(ValueError):
        parse_input("flip 0,0 through 1,1")


def test_part1_square():
    assert part1(parse_input("turn on 0,0 through 2,2")) == 9


def test_part1_reversed_corners_same():
    forward = parse_input("turn on 0,0 through 3,5")
    backward = parse_input("turn on 3,5 through 0,0")
    assert part1(forward) == part1(backward)


def test_part1_toggle_twice_equals_on_then_off():
    toggled = parse_input("toggle 0,0 through 4,4\ntoggle 0,0 through 4,4")
    on_off = parse_input("turn on 0,0 through 4,4\nturn off 0,0 through 4,4")
    assert part1(toggled) == part1(on_off) == part1([])


def test_part2_toggle_single():
    assert part2(parse_input("toggle 0,0 through 0,0")) == 2


def test_part2_never_negative():
    assert part2(parse_input("turn off 0,0 through 3,3")) == part2([])


def test_part2_brightness_accumulates():
    once = parse_input("turn on 0,0 through 2,2")
    twice = parse_input("turn on 0,0 through 2,2\nturn on 0,0 through 2,2")
    assert part2(twice) == 2 * part2(once)
    assert part2(once) == part1(once)