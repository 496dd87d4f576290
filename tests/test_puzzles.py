"""
Test script for puzzle solvers

Uses the published sample inputs to test:
1. Solver registry and factory
2. Expense report solver
3. Toboggan solver and slope traversal
4. Command line entry point

Usage:
    python tests/test_puzzles.py
"""

import contextlib
import io
import sys
import tempfile
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import main as cli
from tilemap.map import MapReadError
from tilemap.puzzles import (
    PuzzleContext,
    PuzzleInputError,
    PuzzleSolver,
    create_puzzle,
    get_default_puzzle_name,
    get_puzzle_info,
    register_puzzle,
)
from tilemap.puzzles.solvers.toboggan import TREE, TobogganSolver, count_trees, parse_slope
from tilemap.settings import save_settings


EXPENSE_SAMPLE = "1721\n979\n366\n299\n675\n1456\n"

SLOPE_SAMPLE = """\
..##.......
#...#...#..
.#....#..#.
..#.#...#.#
.#...##..#.
..#.##.....
.#.#.#....#
.#........#
#.##...#...
#...##....#
.#..#...#.#
"""


def test_registry():
    """Test registration and lookup by name."""
    print("\n" + "="*60)
    print("TEST: Registry")
    print("="*60)

    names = [info["name"] for info in get_puzzle_info()]
    print(f"  Registered: {names}")
    assert "expense_report" in names
    assert "toboggan" in names
    assert get_default_puzzle_name() == "toboggan"
    assert names == sorted(names)
    assert all(info["description"] for info in get_puzzle_info())

    try:
        create_puzzle("no_such_puzzle")
    except ValueError as e:
        assert "toboggan" in str(e)
    else:
        raise AssertionError("unknown puzzle did not raise")

    try:
        register_puzzle(dict)
    except TypeError:
        pass
    else:
        raise AssertionError("non-solver class was registered")

    class Impostor(PuzzleSolver):
        name = "toboggan"

        def solve(self, context):
            raise NotImplementedError

    try:
        register_puzzle(Impostor)
    except ValueError as e:
        assert "TobogganSolver" in str(e)
    else:
        raise AssertionError("second class took the toboggan name")
    assert register_puzzle(TobogganSolver) is TobogganSolver
    assert isinstance(create_puzzle("toboggan"), TobogganSolver)

    print("  [PASS] Registry tests")


def test_expense_report():
    """Test pair and triple products on the sample report."""
    print("\n" + "="*60)
    print("TEST: Expense report")
    print("="*60)

    progress = []
    context = PuzzleContext(
        text=EXPENSE_SAMPLE,
        progress_callback=lambda percent, message: progress.append(percent),
    )
    answer = create_puzzle("expense_report").solve(context)

    print(f"  Parts: {answer.parts}")
    assert answer.get_part("pair") == 514579
    assert answer.get_part("triple") == 241861950
    assert answer.value == 241861950
    assert answer.metrics.puzzle_name == "expense_report"
    assert answer.metrics.states_explored > 0
    assert progress and progress[-1] == 1.0

    print("  [PASS] Expense report tests")


def test_expense_report_rejects_bad_lines():
    context = PuzzleContext(text="1721\nabc\n")
    try:
        create_puzzle("expense_report").solve(context)
    except PuzzleInputError as e:
        assert "Line 2" in str(e)
    else:
        raise AssertionError("malformed line did not raise")


def test_expense_report_without_match():
    answer = create_puzzle("expense_report").solve(PuzzleContext(text="1\n2\n3\n"))
    assert answer.parts == {}
    assert answer.value == 0


def test_toboggan():
    """Test trees hit per recipe and their product."""
    print("\n" + "="*60)
    print("TEST: Toboggan")
    print("="*60)

    answer = create_puzzle("toboggan").solve(PuzzleContext(text=SLOPE_SAMPLE))

    print(f"  Parts: {answer.parts}")
    assert list(answer.parts.values()) == [2, 7, 3, 4, 2]
    assert answer.get_part("right 3, down 1") == 7
    assert answer.value == 336
    assert len(answer.renderings) == 5

    traced = answer.renderings[1].split("\n")
    assert traced[0] == "O ##       "
    assert traced[1] == "#  O#   #  "

    print("  [PASS] Toboggan tests")


def test_slope_traversal_on_copy():
    """Traversals run on clones and leave the parsed map untouched."""
    tile_map = parse_slope(SLOPE_SAMPLE)
    assert tile_map.get_size() == (11, 11)
    trees_before = tile_map.count(TREE)

    instance = tile_map.copy()
    assert count_trees(instance, 1, 3) == 7
    assert tile_map.count(TREE) == trees_before
    assert instance.count(TREE) == trees_before - 7


def test_slope_width_from_text():
    """Trailing open columns still count towards the wrap width."""
    tile_map = parse_slope("#...\n....\n")
    assert tile_map.get_size() == (2, 4)
    assert render_width(tile_map) == 4


def render_width(tile_map) -> int:
    return len(str(tile_map).split("\n")[0])


def test_slope_rows_match_parsed_rows():
    """A lone carriage return stays inside its row, as it does when parsing."""
    tile_map = parse_slope("#.\r.#\n")
    assert sorted(tile_map.data) == [(0, 0), (0, 4)]
    assert tile_map.fixed_extent == ((0, 0), (0, 4))
    assert tile_map.get_size() == (1, 5)

    tile_map = parse_slope("#.\r\n.#\r\n")
    assert tile_map.get_size() == (2, 2)
    assert tile_map.get((1, 1)) == TREE


def test_non_positive_down_rejected():
    """Recipes that never move down would ride forever."""
    for recipe in [(0, 1), (-1, 3)]:
        try:
            TobogganSolver(recipes=[(1, 1), recipe])
        except ValueError as e:
            assert f"down {recipe[0]}" in str(e)
        else:
            raise AssertionError(f"recipe {recipe} accepted")

    try:
        count_trees(parse_slope(SLOPE_SAMPLE), 0, 3)
    except ValueError:
        pass
    else:
        raise AssertionError("count_trees accepted down 0")

    answer = TobogganSolver(recipes=[(2, 1)]).solve(PuzzleContext(text=SLOPE_SAMPLE))
    assert answer.value == 2


def test_context_from_file():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "input"
        path.write_text(EXPENSE_SAMPLE, encoding="utf-8")

        context = PuzzleContext.from_file(path)
        assert context.source == path
        assert context.lines[0] == "1721"
        assert len(context.lines) == 6

    try:
        PuzzleContext.from_file(Path(tmp) / "gone")
    except MapReadError:
        pass
    else:
        raise AssertionError("missing input did not raise")


def test_command_line():
    """Test the entry point end to end."""
    print("\n" + "="*60)
    print("TEST: Command line")
    print("="*60)

    with tempfile.TemporaryDirectory() as tmp:
        slope = Path(tmp) / "slope.txt"
        slope.write_text(SLOPE_SAMPLE, encoding="utf-8")
        image = Path(tmp) / "slope.png"
        config = Path(tmp) / "config.json"

        code = cli.main(["toboggan", "-i", str(slope), "-c", str(config), "-m", "--image", str(image)])
        assert code == 0
        assert image.exists()

        assert cli.main(["--list", "-c", str(config)]) == 0
        assert cli.main(["toboggan", "-i", str(Path(tmp) / "missing"), "-c", str(config)]) == 1
        assert cli.main(["no_such_puzzle", "-i", str(slope), "-c", str(config)]) == 1

    print("  [PASS] Command line tests")


def run_cli(argv) -> tuple:
    output = io.StringIO()
    with contextlib.redirect_stdout(output):
        code = cli.main(argv)
    return code, output.getvalue()


def test_command_line_default_puzzle():
    """Without a puzzle argument the settings choose, then the registry default."""
    with tempfile.TemporaryDirectory() as tmp:
        slope = Path(tmp) / "slope.txt"
        slope.write_text(SLOPE_SAMPLE, encoding="utf-8")
        report = Path(tmp) / "report.txt"
        report.write_text(EXPENSE_SAMPLE, encoding="utf-8")
        config = Path(tmp) / "config.json"

        code, output = run_cli(["-i", str(slope), "-c", str(config)])
        assert code == 0
        assert "Final answer is 336" in output

        save_settings({"puzzle_name": "expense_report"}, config)
        code, output = run_cli(["-i", str(report), "-c", str(config)])
        assert code == 0
        assert "Final answer is 241861950" in output


def _run(test) -> bool:
    try:
        test()
    except AssertionError as e:
        print(f"  [FAIL] {test.__name__}: {e}")
        return False
    return True


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# PUZZLE SOLVER TESTS")
    print("#"*60)

    tests = [
        ("Registry", test_registry),
        ("Expense report", test_expense_report),
        ("Bad expense lines", test_expense_report_rejects_bad_lines),
        ("No expense match", test_expense_report_without_match),
        ("Toboggan", test_toboggan),
        ("Traversal on copy", test_slope_traversal_on_copy),
        ("Slope width", test_slope_width_from_text),
        ("Slope rows", test_slope_rows_match_parsed_rows),
        ("Non-positive down", test_non_positive_down_rejected),
        ("Context from file", test_context_from_file),
        ("Command line", test_command_line),
        ("Default puzzle", test_command_line_default_puzzle),
    ]
    results = [(name, _run(test)) for name, test in tests]

    print("\n" + "="*60)
    print("SUMMARY")
    print("="*60)

    all_passed = True
    for name, passed in results:
        status = "PASS" if passed else "FAIL"
        print(f"  {name}: [{status}]")
        if not passed:
            all_passed = False

    print()
    if all_passed:
        print("All tests PASSED!")
        return 0
    else:
        print("Some tests FAILED!")
        return 1


if __name__ == "__main__":
    sys.exit(main())
