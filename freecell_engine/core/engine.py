import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from .board import Board, Location
from .card import Card
from .deck import new_deck, shuffle
from .rules import capacity, can_add_tableau, can_move_to_free, can_move_to_home
from .standard_spec import StandardSpec as Spec
from .supermove import Move, move_sequence

logger = logging.getLogger(__name__)


class MoveResult(Enum):
    SUCCESS = 'success'
    INVALID_MOVE = 'invalid_move'


class ClickOutcome(Enum):
    """What a click on a cell did to the game"""

    IGNORED = 'ignored'
    SELECTED = 'selected'
    DESELECTED = 'deselected'
    MOVED = 'moved'
    WON = 'won'
    INVALID_MOVE = 'invalid_move'


@dataclass(frozen=True)
class Selection:
    """Run of `count` cards on top of a cell, waiting for a destination"""

    location: Location
    count: int


class FreeCellEngine:
    """
    Freecell game engine

    Owns the board and the selection, validates requested moves and carries them out
    as single-card moves.
    """

    def __init__(self, board: Optional[Board] = None):
        self._board = board if board is not None else Board()
        self._selection: Optional[Selection] = None
        self.game_number: Optional[int] = None

    @property
    def board(self) -> Board:
        return self._board

    @property
    def selection(self) -> Optional[Selection]:
        return self._selection

    def new_game(self, game_number: int) -> None:
        """Start over with a fresh board dealt from the deck shuffled by game_number"""
        deck = shuffle(new_deck(), game_number)
        self._board = Board()
        self._selection = None
        self._board.deal(deck)
        self.game_number = game_number
        logger.info('started game #%d', game_number)

    def max_movable(self, dest: Location) -> int:
        """Number of cards that may be moved onto dest as one unit"""
        return capacity(self._board.count_empty('free'), self._temp_tableau_cells(dest))

    def _temp_tableau_cells(self, dest: Location) -> int:
        empty = self._board.count_empty('tableau')
        if dest.kind == 'tableau' and self._board.is_empty(dest):
            empty -= 1
        return empty

    def _check_move(self, source: Location, dest: Location, count: int) -> Optional[str]:
        """Reason the move is illegal, None when it is legal"""
        if source == dest:
            return 'source and destination are the same cell'
        if source.kind == 'home':
            return 'cards cannot leave a home cell'
        if count < 1 or count > self._board.size(source):
            return f'{source} does not hold {count} cards'
        dest_top = self._board.top(dest)
        if dest.kind == 'free':
            if not can_move_to_free(dest_top, count):
                return f'{dest} cannot take {count} cards'
        elif dest.kind == 'home':
            if not can_move_to_home(self._board.top(source), dest_top, count):
                return f'{dest} cannot take {count} cards from {source}'
        else:
            limit = self.max_movable(dest)
            if count > limit:
                return f'cannot move {count} cards, at most {limit}'
            if not can_add_tableau(self._board.get_cards(source)[-count:], dest_top):
                return f'run of {count} cards from {source} cannot go on {dest}'
        return None

    def is_legal_move(self, source: Location, dest: Location, count: int = 1) -> bool:
        return self._check_move(source, dest, count) is None

    def apply_move(self, source: Location, dest: Location, count: int = 1) -> MoveResult:
        """
        Move the top `count` cards of source onto dest

        The board is left unchanged when the move is illegal.

        Returns:
            MoveResult: SUCCESS or INVALID_MOVE
        """
        reason = self._check_move(source, dest, count)
        if reason is not None:
            logger.debug('invalid move: %s', reason)
            return MoveResult.INVALID_MOVE
        self._execute(source, dest, count)
        self._selection = None
        return MoveResult.SUCCESS

    def _execute(self, source: Location, dest: Location, count: int) -> list[Move]:
        if dest.kind == 'tableau':
            return move_sequence(self._board, source, dest, count, self._temp_tableau_cells(dest))
        self._board.move_one_card(source, dest)
        return [(source, dest)]

    def auto_move_home(self) -> int:
        """
        Move cards home until no free or tableau card can go there

        Returns:
            int: number of cards moved
        """
        self._selection = None
        moved = 0
        card_moved = True
        while card_moved:
            card_moved = False
            for home in self._board.locations('home'):
                source = self._find_home_candidate(home)
                if source is not None:
                    self._board.move_one_card(source, home)
                    moved += 1
                    card_moved = True
        if moved:
            logger.debug('moved %d cards home', moved)
        return moved

    def _find_home_candidate(self, home: Location) -> Optional[Location]:
        home_top = self._board.top(home)
        for kind in ('free', 'tableau'):
            for loc in self._board.locations(kind):
                card = self._board.top(loc)
                if card is not None and can_move_to_home(card, home_top, 1):
                    return loc
        return None

    def select(self, kind: Spec.loc_types, index: int, count: int = 1) -> ClickOutcome:
        """
        Choose a cell, either as the source of a move or as its destination

        Args:
            kind (Spec.loc_types): kind of the chosen cell
            index (int): index of the chosen cell
            count (int): number of cards chosen from the top of the cell

        Returns:
            ClickOutcome: what the choice did
        """
        loc = Location(kind, index)
        if self._selection is None:
            size = self._board.size(loc)
            if kind == 'home' or size == 0 or count < 1 or count > size:
                return ClickOutcome.IGNORED
            self._selection = Selection(loc, count)
            logger.debug('selected %d cards on %s', count, loc)
            return ClickOutcome.SELECTED
        selection, self._selection = self._selection, None
        if selection == Selection(loc, count):
            return ClickOutcome.DESELECTED
        if self.apply_move(selection.location, loc, selection.count) is MoveResult.INVALID_MOVE:
            return ClickOutcome.INVALID_MOVE
        return ClickOutcome.WON if self.is_won() else ClickOutcome.MOVED

    def is_won(self) -> bool:
        return all(self._board.size(home) == len(Spec.ranks) for home in self._board.locations('home'))

    def snapshot(self) -> dict[str, tuple[tuple[Card, ...], ...]]:
        return self._board.snapshot()
