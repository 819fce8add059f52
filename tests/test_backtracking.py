import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algobox.backtracking import (
    first_n_queens,
    flood_fill,
    graph_coloring,
    rat_in_maze,
    solve_n_queens,
    solve_n_queens_by_column,
    solve_sudoku,
)

SOURCE_SCREEN = [
    [1, 1, 1, 1, 1, 1, 1, 1],
    [1, 1, 1, 1, 1, 1, 0, 0],
    [1, 0, 0, 1, 1, 0, 1, 1],
    [1, 2, 2, 2, 2, 0, 1, 0],
    [1, 1, 1, 2, 2, 0, 1, 0],
    [1, 1, 1, 2, 2, 2, 2, 0],
    [1, 1, 1, 1, 1, 2, 1, 1],
    [1, 1, 1, 1, 1, 2, 2, 1],
]

SOURCE_SUDOKU = [
    "957.13.84",
    "483.571.6",
    ".12.49537",
    "17.3.49.2",
    "5.497.36.",
    "3.95.87.1",
    "84579.613",
    ".91.36.75",
    "7.61854.9",
]

SOURCE_MAZE = [[1, 0, 0, 0], [1, 1, 0, 1], [1, 1, 0, 0], [0, 1, 1, 1]]


def _queens(board):
    return [(r, c) for r, row in enumerate(board) for c, ch in enumerate(row) if ch == "Q"]


def _is_valid_queens(board):
    n = len(board)
    queens = _queens(board)
    if len(queens) != n or any(len(row) != n for row in board):
        return False
    rows = {r for r, _ in queens}
    cols = {c for _, c in queens}
    sums = {r + c for r, c in queens}
    diffs = {r - c for r, c in queens}
    return len(rows) == len(cols) == len(sums) == len(diffs) == n


@pytest.mark.parametrize("n", [1, 4, 5, 6])
def test_row_solutions_are_valid_and_distinct(n):
    boards = solve_n_queens(n)
    assert boards
    assert all(_is_valid_queens(b) for b in boards)
    assert len({tuple(b) for b in boards}) == len(boards)


@pytest.mark.parametrize("n", [2, 3])
def test_no_solutions_for_small_boards(n):
    assert solve_n_queens(n) == []
    assert solve_n_queens_by_column(n) == []
    assert first_n_queens(n) is None


def test_eight_queens_count():
    assert len(solve_n_queens(8)) == 92


@pytest.mark.parametrize("n", [1, 4, 5, 6, 7])
def test_both_solvers_find_the_same_boards(n):
    rows = {tuple(b) for b in solve_n_queens(n)}
    cols = {tuple(b) for b in solve_n_queens_by_column(n)}
    assert rows == cols


def test_row_solutions_follow_row_order():
    boards = solve_n_queens(6)
    keys = [tuple(row.index("Q") for row in b) for b in boards]
    assert keys == sorted(keys)


def test_column_solutions_follow_column_order():
    boards = solve_n_queens_by_column(6)
    keys = [tuple(r for c in range(6) for r, row in enumerate(b) if row[c] == "Q") for b in boards]
    assert keys == sorted(keys)


def test_non_positive_row_solver_gives_one_empty_board():
    assert solve_n_queens(0) == [[]]
    assert solve_n_queens(-3) == [[]]


def test_negative_column_solvers_raise():
    with pytest.raises(ValueError):
        solve_n_queens_by_column(-1)
    with pytest.raises(ValueError):
        first_n_queens(-1)


@pytest.mark.parametrize("n", [1, 4, 5, 8])
def test_first_queens_is_first_column_solution(n):
    first = first_n_queens(n)
    assert first == solve_n_queens_by_column(n)[0]
    assert _is_valid_queens(first)


def _source_graph():
    adjacency = [[False] * 4 for _ in range(4)]
    for a, b in [(0, 1), (1, 2), (2, 3), (3, 0), (0, 2)]:
        adjacency[a][b] = adjacency[b][a] = True
    return adjacency


def test_source_graph_colours_with_three():
    adjacency = _source_graph()
    colouring = graph_coloring(adjacency, 3)
    assert colouring is not None
    assert all(1 <= c <= 3 for c in colouring)
    for a in range(4):
        for b in range(4):
            if adjacency[a][b]:
                assert colouring[a] != colouring[b]


def test_source_graph_cannot_colour_with_two():
    assert graph_coloring(_source_graph(), 2) is None


def test_empty_graph_needs_no_colours():
    assert graph_coloring([], 0) == []


def test_edgeless_graph_uses_first_colour():
    assert graph_coloring([[False, False], [False, False]], 1) == [1, 1]


def _follow(maze, path):
    n = len(maze)
    i = j = 0
    seen = {(0, 0)}
    steps = {"D": (1, 0), "U": (-1, 0), "L": (0, -1), "R": (0, 1)}
    for move in path:
        di, dj = steps[move]
        i, j = i + di, j + dj
        assert 0 <= i < n and 0 <= j < n
        assert maze[i][j] == 1
        assert (i, j) not in seen
        seen.add((i, j))
    return i, j


def test_source_maze_paths():
    assert rat_in_maze(SOURCE_MAZE) == ["DDRDRR", "DRDDRR"]


def test_maze_paths_reach_the_exit():
    maze = [[1, 1, 1], [1, 1, 1], [1, 1, 1]]
    paths = rat_in_maze(maze)
    assert paths
    assert len(set(paths)) == len(paths)
    assert all(_follow(maze, p) == (2, 2) for p in paths)


def test_blocked_start_has_no_paths():
    maze = [row[:] for row in SOURCE_MAZE]
    maze[0][0] = 0
    assert rat_in_maze(maze) == []


def test_single_open_cell_has_the_empty_path():
    assert rat_in_maze([[1]]) == [""]


def _check_sudoku(solution, puzzle):
    digits = set("123456789")
    for r in range(9):
        assert set(solution[r]) == digits
        assert {solution[i][r] for i in range(9)} == digits
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            box = {solution[br + i][bc + j] for i in range(3) for j in range(3)}
            assert box == digits
    for r in range(9):
        for c in range(9):
            if puzzle[r][c] != ".":
                assert solution[r][c] == puzzle[r][c]


def test_solves_source_sudoku_without_mutating_input():
    puzzle = [list(row) for row in SOURCE_SUDOKU]
    before = [row[:] for row in puzzle]
    solution = solve_sudoku(puzzle)
    assert solution is not None
    _check_sudoku(solution, SOURCE_SUDOKU)
    assert puzzle == before


def test_solves_empty_sudoku():
    empty = ["." * 9] * 9
    solution = solve_sudoku(empty)
    _check_sudoku(solution, empty)


def test_unsolvable_sudoku_returns_none():
    rows = ["12345678."] + ["." * 8 + "9"] + ["." * 9] * 7
    assert solve_sudoku(rows) is None


def test_sudoku_rejects_bad_shape_and_cells():
    with pytest.raises(ValueError):
        solve_sudoku(["." * 9] * 8)
    with pytest.raises(ValueError):
        solve_sudoku(["x" + "." * 8] + ["." * 9] * 8)


def _check_flood(before, after, x, y, new_color):
    previous = before[x][y]
    changed = {
        (i, j)
        for i, row in enumerate(before)
        for j, _ in enumerate(row)
        if before[i][j] != after[i][j]
    }
    if previous == new_color:
        assert not changed
        assert after == before
        return
    assert (x, y) in changed
    for i, j in changed:
        assert before[i][j] == previous
        assert after[i][j] == new_color
    for i, j in changed:
        for ni, nj in ((i + 1, j), (i - 1, j), (i, j + 1), (i, j - 1)):
            if 0 <= ni < len(before) and 0 <= nj < len(before[ni]):
                if before[ni][nj] == previous:
                    assert (ni, nj) in changed
    # changed cells form one connected region
    reached = {(x, y)}
    frontier = [(x, y)]
    while frontier:
        i, j = frontier.pop()
        for nxt in ((i + 1, j), (i - 1, j), (i, j + 1), (i, j - 1)):
            if nxt in changed and nxt not in reached:
                reached.add(nxt)
                frontier.append(nxt)
    assert reached == changed


def test_flood_fill_source_screen():
    before = [row[:] for row in SOURCE_SCREEN]
    after = flood_fill(SOURCE_SCREEN, 4, 4, 3)
    _check_flood(SOURCE_SCREEN, after, 4, 4, 3)
    assert after[4][4] == 3
    assert SOURCE_SCREEN == before


def test_flood_fill_uniform_screen():
    assert flood_fill([[0, 0], [0, 0]], 1, 0, 5) == [[5, 5], [5, 5]]


def test_flood_fill_same_colour_is_unchanged():
    assert flood_fill(SOURCE_SCREEN, 0, 0, 1) == SOURCE_SCREEN


def test_flood_fill_outside_raises():
    with pytest.raises(IndexError):
        flood_fill(SOURCE_SCREEN, 8, 0, 3)
    with pytest.raises(IndexError):
        flood_fill(SOURCE_SCREEN, 0, -1, 3)


@settings(max_examples=60)
@given(
    st.integers(min_value=1, max_value=6).flatmap(
        lambda h: st.integers(min_value=1, max_value=6).flatmap(
            lambda w: st.tuples(
                st.lists(
                    st.lists(st.integers(0, 2), min_size=w, max_size=w),
                    min_size=h,
                    max_size=h,
                ),
                st.integers(0, h - 1),
                st.integers(0, w - 1),
                st.integers(0, 3),
            )
        )
    )
)
def test_flood_fill_invariants(case):
    screen, x, y, colour = case
    after = flood_fill(screen, x, y, colour)
    _check_flood(screen, after, x, y, colour)