"""Backtracking searches: N queens, graph colouring, maze paths, sudoku and flood fill."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

_DIGITS = "123456789"
_EMPTY = "."

# Maze moves in the order they are tried: down, left, right, up.
_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def _queen_placements(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every non-attacking placement, line by line, in lexicographic order.

    Entry ``i`` of a placement is the position of the queen on line ``i``.
    """
    placed: list[int] = []
    used: set[int] = set()
    sums: set[int] = set()
    diffs: set[int] = set()

    def extend(line: int) -> Iterator[tuple[int, ...]]:
        if line == n:
            yield tuple(placed)
            return
        for pos in range(n):
            if pos in used or line + pos in sums or line - pos in diffs:
                continue
            placed.append(pos)
            used.add(pos)
            sums.add(line + pos)
            diffs.add(line - pos)
            yield from extend(line + 1)
            placed.pop()
            used.discard(pos)
            sums.discard(line + pos)
            diffs.discard(line - pos)

    return extend(0)


def _board_by_rows(n: int, placement: Sequence[int]) -> list[str]:
    return ["." * col + "Q" + "." * (n - col - 1) for col in placement]


def _board_by_columns(n: int, placement: Sequence[int]) -> list[str]:
    row_of_column = {row: col for col, row in enumerate(placement)}
    return [
        "." * row_of_column[row] + "Q" + "." * (n - row_of_column[row] - 1)
        for row in range(n)
    ]


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every N-queens board, placing queens row by row.

    Boards are lists of strings of '.' and 'Q'. For ``n <= 0`` the result
    holds a single empty board.
    """
    if n <= 0:
        return [[]]
    return [_board_by_rows(n, p) for p in _queen_placements(n)]


def solve_n_queens_by_column(n: int) -> list[list[str]]:
    """Return every N-queens board, placing queens column by column."""
    if n < 0:
        raise ValueError("n must not be negative")
    return [_board_by_columns(n, p) for p in _queen_placements(n)]


def first_n_queens(n: int) -> list[str] | None:
    """Return the first board found column by column, or None if there is none."""
    if n < 0:
        raise ValueError("n must not be negative")
    placement = next(_queen_placements(n), None)
    if placement is None:
        return None
    return _board_by_columns(n, placement)


def graph_coloring(
    adjacency: Sequence[Sequence[bool]], colors: int
) -> list[int] | None:
    """Colour the graph with colours 1..*colors* so no edge joins equal colours.

    Returns the colour of each vertex, or None when no such colouring exists.
    """
    n = len(adjacency)
    assigned = [0] * n

    def allowed(node: int, colour: int) -> bool:
        return not any(
            k != node and adjacency[k][node] and assigned[k] == colour
            for k in range(n)
        )

    def solve(node: int) -> bool:
        if node == n:
            return True
        for colour in range(1, colors + 1):
            if allowed(node, colour):
                assigned[node] = colour
                if solve(node + 1):
                    return True
                assigned[node] = 0
        return False

    return assigned if solve(0) else None


def rat_in_maze(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path from the top-left to the bottom-right of a square maze.

    Open cells hold 1. Paths are strings of D, L, R and U, listed in the
    order they are found, trying down, left, right, then up.
    """
    n = len(maze)
    if n == 0 or maze[0][0] != 1:
        return []
    paths: list[str] = []
    visited: set[tuple[int, int]] = set()

    def walk(i: int, j: int, moves: str) -> None:
        if i == n - 1 and j == n - 1:
            paths.append(moves)
            return
        visited.add((i, j))
        for letter, di, dj in _MOVES:
            ni, nj = i + di, j + dj
            if (
                0 <= ni < n
                and 0 <= nj < n
                and (ni, nj) not in visited
                and maze[ni][nj] == 1
            ):
                walk(ni, nj, moves + letter)
        visited.discard((i, j))

    walk(0, 0, "")
    return paths


def _sudoku_allows(board: list[list[str]], row: int, col: int, digit: str) -> bool:
    box_row, box_col = 3 * (row // 3), 3 * (col // 3)
    for i in range(9):
        if board[i][col] == digit or board[row][i] == digit:
            return False
        if board[box_row + i // 3][box_col + i % 3] == digit:
            return False
    return True


def solve_sudoku(board: Iterable[Iterable[str]]) -> list[list[str]] | None:
    """Return a solved copy of a 9x9 sudoku, '.' marking empty cells, or None."""
    grid = [list(row) for row in board]
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("a sudoku board must be 9 by 9")
    for row in grid:
        for cell in row:
            if cell != _EMPTY and cell not in _DIGITS:
                raise ValueError(f"not a sudoku cell: {cell!r}")

    empties = [(r, c) for r in range(9) for c in range(9) if grid[r][c] == _EMPTY]

    def fill(index: int) -> bool:
        if index == len(empties):
            return True
        row, col = empties[index]
        for digit in _DIGITS:
            if _sudoku_allows(grid, row, col, digit):
                grid[row][col] = digit
                if fill(index + 1):
                    return True
                grid[row][col] = _EMPTY
        return False

    return grid if fill(0) else None


def flood_fill(
    screen: Sequence[Sequence[int]], x: int, y: int, new_color: int
) -> list[list[int]]:
    """Return a copy of *screen* with the 4-connected region at (x, y) recoloured."""
    grid = [list(row) for row in screen]
    if not (0 <= x < len(grid) and 0 <= y < len(grid[x])):
        raise IndexError(f"({x}, {y}) is outside the screen")
    previous = grid[x][y]
    if previous == new_color:
        return grid
    stack = [(x, y)]
    while stack:
        i, j = stack.pop()
        if not (0 <= i < len(grid) and 0 <= j < len(grid[i])):
            continue
        if grid[i][j] != previous:
            continue
        grid[i][j] = new_color
        stack.extend(((i + 1, j), (i - 1, j), (i, j + 1), (i, j - 1)))
    return grid