"""Move legality rules, as pure predicates over cards"""
import logging
from typing import Optional, Sequence
from .card import Card

logger = logging.getLogger(__name__)


def capacity(free_cells: int, tableau_cells: int) -> int:
    """
    Maximum number of cards movable as one unit

    Args:
        free_cells (int): number of empty free cells
        tableau_cells (int): number of empty tableau columns usable as temporary storage,
            not counting the destination

    Returns:
        int: (2 ** tableau_cells) * (free_cells + 1)
    """
    if free_cells < 0 or tableau_cells < 0:
        raise ValueError(f'cannot compute capacity for {free_cells} free cells and {tableau_cells} tableau cells')
    return (1 << tableau_cells) * (free_cells + 1)


def can_move_to_free(dest_top: Optional[Card], count: int) -> bool:
    return dest_top is None and count == 1


def can_move_to_home(card: Card, dest_top: Optional[Card], count: int) -> bool:
    if count != 1:
        return False
    if dest_top is None:
        return card.rank == 1
    return card.suit == dest_top.suit and card.rank == dest_top.rank + 1


def can_stack_on(card: Card, target: Card) -> bool:
    """Whether card may be placed directly on target in the tableau"""
    return card.is_red != target.is_red and card.rank == target.rank - 1


def can_add_tableau(run: Sequence[Card], dest_top: Optional[Card]) -> bool:
    """
    Whether a run of cards is a legal unit to place on a tableau column

    Args:
        run (Sequence[Card]): cards to move, bottom to top as they lie in the source cell
        dest_top (Optional[Card]): top card of the destination, None when it is empty

    Returns:
        bool: True if the run is a cascade that can land on the destination
    """
    if not run:
        return False
    for lower, upper in zip(run[:-1], run[1:]):
        if not can_stack_on(upper, lower):
            logger.debug('%s cannot sit on %s inside the run', upper, lower)
            return False
    if dest_top is not None and not can_stack_on(run[0], dest_top):
        logger.debug('%s cannot land on %s', run[0], dest_top)
        return False
    return True
