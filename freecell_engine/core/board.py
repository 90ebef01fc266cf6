import logging
from typing import Iterable, NamedTuple, Optional
from .card import Card
from .standard_spec import StandardSpec as Spec

logger = logging.getLogger(__name__)


class Location(NamedTuple):
    """Stable identifier of a cell on the board"""

    kind: Spec.loc_types
    index: int

    def __str__(self) -> str:
        return f'{self.kind}[{self.index}]'


class Board:
    """
    Complete freecell game state

    The board owns every cell. Each cell is a list of cards ordered bottom to top,
    so the accessible card is always the last one.
    """

    def __init__(self):
        self._cells: dict[str, list[list[Card]]] = {
            'free': [[] for _ in range(Spec.num_free_cells)],
            'home': [[] for _ in range(Spec.num_home_cells)],
            'tableau': [[] for _ in range(Spec.num_tableau_cells)],
        }

    def _cell(self, loc: Location) -> list[Card]:
        kind, idx = loc
        if kind not in self._cells:
            raise ValueError(f'location type cannot be {kind}')
        if idx < 0 or idx >= len(self._cells[kind]):
            raise ValueError(f'{kind} index cannot be {idx}')
        return self._cells[kind][idx]

    def get_cards(self, loc: Location) -> tuple[Card, ...]:
        """Cards of a cell, bottom to top"""
        return tuple(self._cell(loc))

    def top(self, loc: Location) -> Optional[Card]:
        cell = self._cell(loc)
        return cell[-1] if cell else None

    def size(self, loc: Location) -> int:
        return len(self._cell(loc))

    def is_empty(self, loc: Location) -> bool:
        return not self._cell(loc)

    def locations(self, kind: Spec.loc_types) -> list[Location]:
        return [Location(kind, i) for i in range(Spec.num_cells(kind))]

    def count_empty(self, kind: Spec.loc_types) -> int:
        return sum(1 for loc in self.locations(kind) if self.is_empty(loc))

    def find_empty(self, kind: Spec.loc_types, exclude: Optional[Location] = None) -> Optional[int]:
        """
        Find the first empty cell of a kind

        Args:
            kind (Spec.loc_types): kind of cell to search
            exclude (Optional[Location]): a cell that must not be returned

        Returns:
            Optional[int]: index of the empty cell, None when there is none
        """
        for loc in self.locations(kind):
            if loc != exclude and self.is_empty(loc):
                return loc.index
        return None

    def move_one_card(self, source: Location, dest: Location) -> Card:
        """Move the top card of source onto dest without verification"""
        source_cell, dest_cell = self._cell(source), self._cell(dest)
        if not source_cell:
            raise ValueError(f'cannot move a card from empty cell {source}')
        card = source_cell.pop()
        dest_cell.append(card)
        logger.debug('moved %s from %s to %s', card, source, dest)
        return card

    def put_cards(self, loc: Location, cards: Iterable[Card]) -> None:
        """Put cards, bottom to top, onto a cell without verification"""
        self._cell(loc).extend(cards)

    def deal(self, deck: Iterable[Card]) -> None:
        """Deal cards round-robin onto the tableau, starting with the first column"""
        for i, card in enumerate(deck):
            self.put_cards(Location('tableau', i % Spec.num_tableau_cells), [card])

    def all_cards(self) -> list[Card]:
        return [card for cells in self._cells.values() for cell in cells for card in cell]

    def snapshot(self) -> dict[str, tuple[tuple[Card, ...], ...]]:
        """Read-only copy of every cell, bottom to top"""
        return {kind: tuple(tuple(cell) for cell in cells) for kind, cells in self._cells.items()}
