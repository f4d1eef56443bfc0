"""A backtracking N-queens solver on a board of '-' and 'Q' cells."""

import warnings

EMPTY = "-"
QUEEN = "Q"

Board = list[list[str]]


def is_safe(board: Board, row: int, col: int) -> bool:
    """Check whether a queen may be placed at (``row``, ``col``).

    Only the columns to the left are examined, since queens are placed
    column by column. The lower-left diagonal scan stops one row short of
    the bottom edge.
    """
    size = len(board)
    if any(board[row][i] == QUEEN for i in range(col)):
        return False
    upper = zip(range(row, -1, -1), range(col, -1, -1))
    if any(board[r][c] == QUEEN for r, c in upper):
        return False
    lower = zip(range(row, size - 1), range(col, -1, -1))
    if any(board[r][c] == QUEEN for r, c in lower):
        return False
    return True


def solve_nq_util(board: Board, col: int) -> bool:
    """Place queens from column ``col`` onward; return True on success.

    The board is modified in place.
    """
    if col >= len(board):
        return True
    for row in range(len(board)):
        if is_safe(board, row, col):
            board[row][col] = QUEEN
            if solve_nq_util(board, col + 1):
                return True
            board[row][col] = EMPTY
    return False


def nqueens(n: int) -> Board:
    """Return an ``n`` x ``n`` board with queens placed by backtracking.

    If no placement is found, a RuntimeWarning is issued and the empty
    board is returned.
    """
    board = [[EMPTY] * n for _ in range(n)]
    if not solve_nq_util(board, 0):
        warnings.warn("Solution doesn't exist!", RuntimeWarning, stacklevel=2)
    return board