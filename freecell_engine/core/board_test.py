import unittest
from .board import Board, Location
from .card import Card, Suit
from .deck import new_deck

class TestBoard(unittest.TestCase):
    """Unit test class for the board"""

    def setUp(self):
        self.board = Board()

    def test_new_board_is_empty(self):
        self.assertEqual(self.board.count_empty('free'), 4)
        self.assertEqual(self.board.count_empty('home'), 4)
        self.assertEqual(self.board.count_empty('tableau'), 8)
        self.assertEqual(self.board.all_cards(), [])

    def test_deal_round_robin(self):
        deck = new_deck()
        self.board.deal(deck)
        sizes = [self.board.size(loc) for loc in self.board.locations('tableau')]
        self.assertEqual(sizes, [7, 7, 7, 7, 6, 6, 6, 6])
        self.assertEqual(self.board.get_cards(Location('tableau', 0))[0], deck[0])
        self.assertEqual(self.board.get_cards(Location('tableau', 0))[1], deck[8])
        self.assertEqual(self.board.top(Location('tableau', 3)), deck[51])
        self.assertEqual(sorted(c.code for c in self.board.all_cards()), list(range(1, 53)))

    def test_find_empty(self):
        self.board.put_cards(Location('tableau', 0), [Card(5, Suit.CLUBS)])
        self.assertEqual(self.board.find_empty('tableau'), 1)
        self.assertEqual(self.board.find_empty('tableau', exclude=Location('tableau', 1)), 2)
        for i in range(4):
            self.board.put_cards(Location('free', i), [Card(i + 1, Suit.HEARTS)])
        self.assertIsNone(self.board.find_empty('free'))

    def test_move_one_card(self):
        source, dest = Location('tableau', 0), Location('free', 2)
        self.board.put_cards(source, [Card(5, Suit.CLUBS), Card(4, Suit.HEARTS)])
        card = self.board.move_one_card(source, dest)
        self.assertEqual(card, Card(4, Suit.HEARTS))
        self.assertEqual(self.board.get_cards(source), (Card(5, Suit.CLUBS),))
        self.assertEqual(self.board.top(dest), Card(4, Suit.HEARTS))
        with self.assertRaises(ValueError):
            self.board.move_one_card(Location('free', 0), dest)

    def test_bad_location(self):
        with self.assertRaises(ValueError):
            self.board.size(Location('tableau', 8))
        with self.assertRaises(ValueError):
            self.board.size(Location('cascade', 0))

    def test_snapshot_is_a_copy(self):
        loc = Location('tableau', 0)
        self.board.put_cards(loc, [Card(5, Suit.CLUBS)])
        snapshot = self.board.snapshot()
        self.board.move_one_card(loc, Location('free', 0))
        self.assertEqual(snapshot['tableau'][0], (Card(5, Suit.CLUBS),))
        self.assertEqual(snapshot['free'][0], ())
        self.assertEqual(len(snapshot['home']), 4)

if __name__ == '__main__':
    unittest.main()
