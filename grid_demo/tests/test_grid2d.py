import io

import numpy as np
import pytest

from grid_demo.src.core import InvalidArgumentError, TwoDGrid
from grid_demo.src.utils.console import ConsoleIO, INVALID_VALUE_MESSAGE


class FakeRng:
    """Returns a fixed block of values regardless of the requested range."""

    def __init__(self, values):
        self.values = values
        self.calls = []

    def integers(self, low, high, size=None):
        self.calls.append((low, high, size))
        return np.array(self.values).reshape(size)


def _grid_from(rows):
    grid = TwoDGrid(console=ConsoleIO(stdout=io.StringIO()))
    for i, row in enumerate(rows):
        for j, val in enumerate(row):
            grid.set(i, j, val)
    return grid


def test_starts_zero_filled():
    grid = TwoDGrid()
    assert grid.shape() == (3, 3)
    assert grid.to_list() == [[0, 0, 0]] * 3
    assert not grid.populated
    assert grid.min_element() == 0


@pytest.mark.parametrize("low,high", [(-50, 50), (0, 0), (-3, -1), (7, 9)])
def test_fill_random_within_range(low, high):
    grid = TwoDGrid(rng=np.random.default_rng(1))
    for _ in range(20):
        grid.fill_random(low, high)
        values = [v for row in grid.to_list() for v in row]
        assert all(low <= v <= high for v in values)
    assert grid.populated


def test_fill_random_default_range_passes_inclusive_upper_bound():
    rng = FakeRng(list(range(9)))
    grid = TwoDGrid(rng=rng)
    grid.fill_random()
    assert rng.calls == [(-50, 51, (3, 3))]
    assert grid.to_list() == [[0, 1, 2], [3, 4, 5], [6, 7, 8]]


def test_fill_random_inverted_range_raises():
    grid = TwoDGrid()
    with pytest.raises(InvalidArgumentError):
        grid.fill_random(5, 4)
    assert grid.to_list() == [[0, 0, 0]] * 3


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        TwoDGrid().fill_random(1, -1)


def test_construct_with_fill_random():
    rng = FakeRng([9, 8, 7, 6, 5, 4, 3, 2, 1])
    grid = TwoDGrid(fill_random=True, rng=rng)
    assert grid.populated
    assert grid.min_element() == 1


def test_min_element_matches_exhaustive_scan():
    grid = TwoDGrid(rng=np.random.default_rng(42))
    for _ in range(10):
        grid.fill_random()
        values = [v for row in grid.to_list() for v in row]
        assert grid.min_element() == min(values)


def test_min_element_explicit_values():
    grid = _grid_from([[1, 2, 3], [4, 5, -6], [7, 8, 9]])
    assert grid.min_element() == -6
    assert isinstance(grid.min_element(), int)


def test_render_rows_are_right_aligned():
    grid = _grid_from([[1, 2, 3], [4, 5, -6], [7, 8, 9]])
    lines = grid.render().splitlines()
    assert lines[0] == TwoDGrid.TITLE
    assert lines[1:] == [
        "     1     2     3",
        "     4     5    -6",
        "     7     8     9",
    ]


def test_print_writes_to_console_and_is_idempotent():
    out = io.StringIO()
    grid = TwoDGrid(rng=np.random.default_rng(3), console=ConsoleIO(stdout=out))
    grid.fill_random()
    grid.print()
    first = out.getvalue()
    grid.print()
    assert out.getvalue() == first * 2
    assert grid.min_element() == grid.min_element()


def test_print_defaults_to_stdout(capsys):
    grid = _grid_from([[1, 2, 3], [4, 5, -6], [7, 8, 9]])
    grid.console = ConsoleIO()
    grid.print()
    assert "    -6" in capsys.readouterr().out


def test_input_from_console_reprompts_on_invalid():
    stdin = io.StringIO("abc\n5\n1\n2\n3\n4\n-6\n7\n8\n9\n")
    out = io.StringIO()
    grid = TwoDGrid(console=ConsoleIO(stdin=stdin, stdout=out))
    grid.input_from_console()
    assert grid.to_list() == [[5, 1, 2], [3, 4, -6], [7, 8, 9]]
    text = out.getvalue()
    assert text.count(INVALID_VALUE_MESSAGE) == 1
    assert text.count("A[0,0] = ") == 2
    assert grid.populated


def test_input_order_is_row_major():
    stdin = io.StringIO("".join(f"{n}\n" for n in range(9)))
    out = io.StringIO()
    grid = TwoDGrid(console=ConsoleIO(stdin=stdin, stdout=out))
    grid.input_from_console()
    prompts = [p for p in out.getvalue().split("= ") if p.strip()]
    assert prompts[1].endswith("A[0,1] ")
    assert prompts[3].endswith("A[1,0] ")
    assert grid.get(2, 1) == 7


def test_refill_overwrites_previous_input():
    stdin = io.StringIO("100\n" * 9)
    grid = TwoDGrid(rng=np.random.default_rng(0), console=ConsoleIO(stdin=stdin, stdout=io.StringIO()))
    grid.input_from_console()
    grid.fill_random(-1, 1)
    assert all(-1 <= v <= 1 for row in grid.to_list() for v in row)


def test_to_list_is_a_copy():
    grid = _grid_from([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    snapshot = grid.to_list()
    snapshot[0][0] = -99
    assert grid.get(0, 0) == 1
