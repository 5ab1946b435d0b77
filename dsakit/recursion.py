"""Recursive and backtracking algorithms."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

Board = list[list[int]]


def permutations(text: str) -> list[str]:
    """All orderings of the characters of ``text``, positions taken left to right."""
    return list(_permute(text, [False] * len(text), []))


def _permute(text: str, used: list[bool], prefix: list[str]) -> Iterator[str]:
    if len(prefix) == len(text):
        yield "".join(prefix)
    for i, ch in enumerate(text):
        if not used[i]:
            used[i] = True
            prefix.append(ch)
            yield from _permute(text, used, prefix)
            prefix.pop()
            used[i] = False


def subsequences(text: str) -> list[str]:
    """All subsequences of ``text``; at each character taking it comes before skipping it."""
    return list(_subsequences(text, 0, ""))


def _subsequences(text: str, i: int, chosen: str) -> Iterator[str]:
    if i == len(text):
        yield chosen
        return
    yield from _subsequences(text, i + 1, chosen + text[i])
    yield from _subsequences(text, i + 1, chosen)


def tower_of_hanoi(
    disks: int, source: int = 1, helper: int = 2, destination: int = 3
) -> list[tuple[int, int]]:
    """Moves, as ``(from, to)`` tower pairs, that carry ``disks`` from source to destination."""
    moves: list[tuple[int, int]] = []

    def move(n: int, src: int, via: int, dst: int) -> None:
        if n > 0:
            move(n - 1, src, dst, via)
            moves.append((src, dst))
            move(n - 1, via, src, dst)

    move(disks, source, helper, destination)
    return moves


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, counting from fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def can_place(board: Sequence[Sequence[int]], row: int, col: int, num: int) -> bool:
    """Whether ``num`` is absent from the row, column and 3x3 box of a cell."""
    if any(board[row][k] == num for k in range(9)):
        return False
    if any(board[k][col] == num for k in range(9)):
        return False
    top, left = row // 3 * 3, col // 3 * 3
    return all(
        board[r][c] != num for r in range(top, top + 3) for c in range(left, left + 3)
    )


def solve_sudoku(board: Sequence[Sequence[int]]) -> Board | None:
    """A solved copy of a 9x9 board where 0 marks an empty cell, or None if none exists."""
    grid = [list(row) for row in board]
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("board must be 9x9")
    if any(not 0 <= cell <= 9 for row in grid for cell in row):
        raise ValueError("cells must hold 0 to 9")
    return grid if _solve(grid, 0) else None


def _solve(grid: Board, cell: int) -> bool:
    while cell < 81 and grid[cell // 9][cell % 9] != 0:
        cell += 1
    if cell == 81:
        return True
    row, col = divmod(cell, 9)
    for num in range(1, 10):
        if can_place(grid, row, col, num):
            grid[row][col] = num
            if _solve(grid, cell + 1):
                return True
    grid[row][col] = 0
    return False