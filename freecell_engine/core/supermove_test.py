import unittest
from collections import Counter
from .board import Board, Location
from .card import Card, Suit
from .deck import new_deck
from .rules import capacity, can_add_tableau, can_move_to_free
from .supermove import DecompositionPrecondition, move_sequence

SUIT_CYCLE = [Suit.SPADES, Suit.HEARTS, Suit.CLUBS, Suit.DIAMONDS]


def cascade(length: int, high: int = 13, start: int = 0) -> list[Card]:
    """Alternating-color descending run, bottom to top"""
    return [Card(high - i, SUIT_CYCLE[(start + i) % 4]) for i in range(length)]


def make_board(run: list[Card], free_cells: int, tableau_cells: int) -> Board:
    """
    Board with the run on tableau 0, an empty tableau 1, `free_cells` empty free cells
    and `tableau_cells` more empty columns, every other cell holding a filler card
    """
    board = Board()
    board.put_cards(Location('tableau', 0), run)
    fillers = iter(card for card in new_deck() if card not in run)
    for i in range(4 - free_cells):
        board.put_cards(Location('free', i), [next(fillers)])
    for i in range(2 + tableau_cells, 8):
        board.put_cards(Location('tableau', i), [next(fillers)])
    return board


class TestSupermove(unittest.TestCase):
    """Unit test class for the supermove executor"""

    source = Location('tableau', 0)
    dest = Location('tableau', 1)

    def test_order_and_cleanliness(self):
        for free_cells in range(5):
            for tableau_cells in range(4):
                max_len = min(13, capacity(free_cells, tableau_cells))
                for length in range(1, max_len + 1):
                    with self.subTest(free_cells=free_cells, tableau_cells=tableau_cells, length=length):
                        run = cascade(length)
                        board = make_board(run, free_cells, tableau_cells)
                        before = board.snapshot()
                        cards_before = Counter(board.all_cards())
                        move_sequence(board, self.source, self.dest, length, tableau_cells)
                        after = board.snapshot()
                        self.assertEqual(board.get_cards(self.dest), tuple(run))
                        self.assertEqual(board.get_cards(self.source), ())
                        self.assertEqual(after['free'], before['free'])
                        self.assertEqual(after['tableau'][2:], before['tableau'][2:])
                        self.assertEqual(Counter(board.all_cards()), cards_before)

    def test_every_step_is_legal(self):
        run = cascade(12, high=12, start=0)
        board = make_board(run, 2, 2)
        board.put_cards(self.dest, [Card(13, Suit.HEARTS)])
        replay = make_board(run, 2, 2)
        replay.put_cards(self.dest, [Card(13, Suit.HEARTS)])
        moves = move_sequence(board, self.source, self.dest, 12, 2)
        for source, dest in moves:
            card = replay.top(source)
            if dest.kind == 'free':
                self.assertTrue(can_move_to_free(replay.top(dest), 1))
            else:
                self.assertEqual(dest.kind, 'tableau')
                self.assertTrue(can_add_tableau([card], replay.top(dest)), f'{card} onto {replay.top(dest)}')
            replay.move_one_card(source, dest)
        self.assertEqual(replay.snapshot(), board.snapshot())
        self.assertEqual(board.get_cards(self.dest), (Card(13, Suit.HEARTS),) + tuple(run))

    def test_split_order(self):
        run = cascade(2)
        board = make_board(run, 0, 1)
        temp = Location('tableau', 2)
        moves = move_sequence(board, self.source, self.dest, 2, 1)
        self.assertEqual(moves, [(self.source, temp), (self.source, self.dest), (temp, self.dest)])

    def test_free_cells_unparked_in_reverse(self):
        run = cascade(3)
        board = make_board(run, 2, 0)
        free2, free3 = Location('free', 2), Location('free', 3)
        moves = move_sequence(board, self.source, self.dest, 3, 0)
        self.assertEqual(moves, [
            (self.source, free2), (self.source, free3), (self.source, self.dest),
            (free3, self.dest), (free2, self.dest),
        ])

    def test_odd_split_moves_every_card(self):
        run = cascade(5)
        board = make_board(run, 1, 2)
        move_sequence(board, self.source, self.dest, 5, 2)
        self.assertEqual(board.get_cards(self.dest), tuple(run))

    def test_over_capacity_fails(self):
        run = cascade(3)
        board = make_board(run, 0, 1)
        with self.assertRaises(DecompositionPrecondition):
            move_sequence(board, self.source, self.dest, 3, 1)

    def test_more_cards_than_source(self):
        board = make_board(cascade(2), 4, 0)
        with self.assertRaises(DecompositionPrecondition):
            move_sequence(board, self.source, self.dest, 3, 0)

if __name__ == '__main__':
    unittest.main()
