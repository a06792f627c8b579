from aocsolutions.y2015.day12 import part1


def test_array_sum():
    assert part1("[1,2,3]") == 6


def test_nested_objects():
    assert part1('{"a":{"b":4},"c":-1}') == 3


def test_empty_document():
    assert part1("[]") == 0


def test_cancelling_numbers():
    assert part1('{"a":[-1,1]}') == part1("{}")


def test_concatenation_is_additive():
    a, b = '[10,{"x":-3}]', '{"y":[7,8]}'
    assert part1(a + b) == part1(a) + part1(b)