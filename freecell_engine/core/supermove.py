"""
Supermove executor

Relocates a validated run of cards between two cells using only single-card moves,
staging cards in empty free cells and empty tableau columns. The divide and conquer
decomposition runs on an explicit stack of pending subproblems.
"""
import logging
from dataclasses import dataclass
from .board import Board, Location

logger = logging.getLogger(__name__)

Move = tuple[Location, Location]


class DecompositionPrecondition(RuntimeError):
    """Raised when a supermove runs out of staging cells, i.e. it was never validated"""


@dataclass(frozen=True)
class Subproblem:
    """One step of a supermove: relocate `length` cards from source to dest"""

    source: Location
    dest: Location
    length: int
    available_tableau_cells: int


def move_sequence(board: Board, source: Location, dest: Location, length: int,
                  available_tableau_cells: int) -> list[Move]:
    """
    Move the top `length` cards of source onto dest, keeping their order

    The caller must already have checked the run is legal and within capacity.
    Every staging cell used is empty again when this returns.

    Args:
        board (Board): board to mutate
        source (Location): cell holding the run
        dest (Location): cell receiving the run
        length (int): number of cards in the run
        available_tableau_cells (int): empty tableau columns usable as temporary storage

    Raises:
        DecompositionPrecondition: when a staging cell is missing

    Returns:
        list[Move]: the single-card moves performed, in order
    """
    if length < 1 or length > board.size(source):
        raise DecompositionPrecondition(f'cannot move {length} cards from {source}')
    free_cells = board.count_empty('free')
    moves: list[Move] = []
    pending = [Subproblem(source, dest, length, available_tableau_cells)]
    while pending:
        sub = pending.pop()
        if sub.length <= free_cells + 1:
            moves.extend(_move_through_free_cells(board, sub))
            continue
        temp_idx = board.find_empty('tableau', exclude=sub.dest)
        if sub.available_tableau_cells <= 0 or temp_idx is None:
            raise DecompositionPrecondition(
                f'no temporary tableau cell to move {sub.length} cards from {sub.source} to {sub.dest}'
            )
        temp = Location('tableau', temp_idx)
        # the lower part of the run may be one card longer than the parked upper part
        half = sub.length // 2
        rest = sub.length - half
        avail = sub.available_tableau_cells - 1
        logger.debug('split %d cards from %s to %s via %s', sub.length, sub.source, sub.dest, temp)
        pending.append(Subproblem(temp, sub.dest, half, avail))
        pending.append(Subproblem(sub.source, sub.dest, rest, avail))
        pending.append(Subproblem(sub.source, temp, half, avail))
    return moves


def _move_through_free_cells(board: Board, sub: Subproblem) -> list[Move]:
    moves: list[Move] = []
    parked: list[Location] = []
    for _ in range(sub.length - 1):
        idx = board.find_empty('free')
        if idx is None:
            raise DecompositionPrecondition(f'no free cell to park a card from {sub.source}')
        cell = Location('free', idx)
        board.move_one_card(sub.source, cell)
        moves.append((sub.source, cell))
        parked.append(cell)
    board.move_one_card(sub.source, sub.dest)
    moves.append((sub.source, sub.dest))
    for cell in reversed(parked):
        board.move_one_card(cell, sub.dest)
        moves.append((cell, sub.dest))
    return moves
