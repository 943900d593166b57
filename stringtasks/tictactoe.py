"""Judging a finished (or abandoned) tic-tac-toe board.

A board is three strings of three characters each: ``X`` for a cross,
``O`` for a nought and ``.`` for an empty cell.  The winner searches
return one of ``"X"``, ``"O"``, ``"."`` (no winner) or ``"?"`` (the
board holds conflicting wins).
"""

from collections.abc import Iterable, Sequence
from enum import Enum

X = "X"
O = "O"
EMPTY = "."
CONFLICT = "?"

_SIZE = 3
_MARKS = frozenset((X, O, EMPTY))


class Outcome(Enum):
    """The verdict on a board."""

    INCORRECT = "Incorrect"
    PETYA_WON = "Petya won"
    VASYA_WON = "Vasya won"
    NOBODY = "Nobody"


def _grid(rows: Sequence[str]) -> Sequence[str]:
    if len(rows) != _SIZE or any(len(row) != _SIZE for row in rows):
        raise ValueError(f"board must be {_SIZE} rows of {_SIZE} cells: {rows!r}")
    return rows


def _full_lines(lines: Iterable[Sequence[str]]) -> list[str]:
    return [line[0] for line in lines if line[0] == line[1] == line[2]]


def _line_winner(lines: Iterable[Sequence[str]]) -> str:
    full = _full_lines(lines)
    crosses, noughts = full.count(X), full.count(O)
    if (crosses, noughts) == (0, 0):
        return EMPTY
    if (crosses, noughts) == (1, 0):
        return X
    if (crosses, noughts) == (0, 1):
        return O
    return CONFLICT


def is_valid_board(rows: Sequence[str]) -> bool:
    """Return whether ``rows`` is three rows of three ``X``, ``O`` or ``.`` cells."""
    return len(rows) == _SIZE and all(
        len(row) == _SIZE and set(row) <= _MARKS for row in rows
    )


def winner_in_rows(rows: Sequence[str]) -> str:
    """Return the single mark that fills a row, ``"."`` if none, ``"?"`` if several rows are won."""
    return _line_winner(_grid(rows))


def winner_in_columns(rows: Sequence[str]) -> str:
    """Return the single mark that fills a column, ``"."`` if none, ``"?"`` if several are won."""
    return _line_winner(zip(*_grid(rows)))


def winner_in_diagonals(rows: Sequence[str]) -> str:
    """Return the mark filling exactly one diagonal, otherwise ``"."``."""
    grid = _grid(rows)
    main = (grid[0][0], grid[1][1], grid[2][2])
    anti = (grid[0][2], grid[1][1], grid[2][0])
    full = _full_lines((main, anti))
    if len(full) == 1 and full[0] in (X, O):
        return full[0]
    return EMPTY


def count_mark(rows: Iterable[str], mark: str) -> int:
    """Return how many cells of the board hold ``mark``."""
    return sum(row.count(mark) for row in rows)


def search_winner(rows: Sequence[str]) -> str:
    """Return the winner whose mark count fits the win, ``"?"`` if it does not, ``"."`` if none."""
    crosses, noughts = count_mark(rows, X), count_mark(rows, O)
    for finder in (winner_in_rows, winner_in_columns, winner_in_diagonals):
        winner = finder(rows)
        if winner == X:
            return X if crosses - 1 == noughts else CONFLICT
        if winner == O:
            return O if crosses == noughts else CONFLICT
    return EMPTY


def _has_repeated_or_rival_winners(found: Sequence[str]) -> bool:
    if any(found.count(mark) >= 2 for mark in (X, O)):
        return True
    return X in found and O in found


def is_consistent(rows: Sequence[str]) -> bool:
    """Return whether the board could have come out of a real game."""
    if not is_valid_board(rows):
        return False
    if search_winner(rows) == CONFLICT:
        return False
    found = (winner_in_rows(rows), winner_in_columns(rows), winner_in_diagonals(rows))
    if CONFLICT in found[:2]:
        return False
    if _has_repeated_or_rival_winners(found):
        return False
    crosses, noughts = count_mark(rows, X), count_mark(rows, O)
    return crosses == noughts or noughts == crosses - 1


def evaluate(rows: Sequence[str]) -> Outcome:
    """Judge the board."""
    if not is_consistent(rows):
        return Outcome.INCORRECT
    winner = search_winner(rows)
    if winner == X:
        return Outcome.PETYA_WON
    if winner == O:
        return Outcome.VASYA_WON
    return Outcome.NOBODY