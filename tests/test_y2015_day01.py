from aocsolutions.y2015.day01 import main, part1, part2


def test_part1_example():
    assert part1("))(((((") == 3


def test_part1_balanced_strings_agree():
    assert part1("(())") == part1("()()")
    assert part1("((()))") == part1("")


def test_part1_mirror_negates():
    text = "((()(()"
    mirrored = text.translate(str.maketrans("()", ")("))
    assert part1(mirrored) == -part1(text)


def test_part2_first_basement_step():
    assert part2(")") == 1
    assert part2("()())") == 5


def test_part2_without_basement_is_final_floor():
    for text in ["((", "(()", "()()(("]:
        assert part2(text) == part1(text)


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("(()(\n")
    main([str(path)])
    out = capsys.readouterr().out
    assert f"Part 1: {part1('(()(')} " in out
    assert f"Part 2: {part2('(()(')} " in out