import numpy as np
from .card import Card, Suit
from .standard_spec import StandardSpec as Spec


def new_deck() -> list[Card]:
    """Standard deck ordered by suit, then rank"""
    return [Card(rank, suit) for suit in Suit for rank in range(1, len(Spec.ranks) + 1)]


def shuffle(deck: list[Card], game_number: int) -> list[Card]:
    """
    Shuffle a deck in place, reproducibly for a given game number

    Fisher-Yates from the last position down, drawing from a generator seeded by the
    game number.

    Args:
        deck (list[Card]): deck to shuffle
        game_number (int): seed, in [Spec.min_game_number, Spec.max_game_number]

    Returns:
        list[Card]: the same deck, shuffled
    """
    if game_number < Spec.min_game_number or game_number > Spec.max_game_number:
        raise ValueError(f'game number cannot be {game_number}')
    rng = np.random.default_rng(game_number)
    for i in range(len(deck) - 1, 0, -1):
        j = int(rng.integers(i + 1))
        deck[i], deck[j] = deck[j], deck[i]
    return deck
