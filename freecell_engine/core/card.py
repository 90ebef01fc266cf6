from dataclasses import dataclass
from enum import IntEnum
from .standard_spec import StandardSpec as Spec


class InvalidCard(ValueError):
    """Raised when a card is constructed with a rank or suit outside the deck"""


class Suit(IntEnum):
    """The four suits, in deck order"""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def is_red(self) -> bool:
        return self in (Suit.DIAMONDS, Suit.HEARTS)


@dataclass(frozen=True)
class Card:
    """
    An immutable playing card

    rank runs from 1 (Ace) to 13 (King)
    """

    rank: int
    suit: Suit

    def __post_init__(self):
        if not isinstance(self.rank, int) or isinstance(self.rank, bool) \
            or self.rank < 1 or self.rank > len(Spec.ranks):
            raise InvalidCard(f'rank of card cannot be {self.rank!r}')
        try:
            suit = Suit(self.suit)
        except ValueError as exc:
            raise InvalidCard(f'suit of card cannot be {self.suit!r}') from exc
        object.__setattr__(self, 'suit', suit)

    @property
    def is_red(self) -> bool:
        return self.suit.is_red

    @property
    def color(self) -> str:
        return Spec.colors[0] if self.is_red else Spec.colors[1]

    @property
    def code(self) -> int:
        """Integer code in [1, 52], unique per card"""
        return self.suit * len(Spec.ranks) + self.rank

    @classmethod
    def from_code(cls, code: int) -> 'Card':
        if code < 1 or code > Spec.num_cards:
            raise InvalidCard(f'code of card cannot be {code}')
        suit, rank = divmod(code - 1, len(Spec.ranks))
        return cls(rank + 1, Suit(suit))

    @property
    def label(self) -> str:
        return Spec.ranks[self.rank - 1] + Spec.suits[self.suit][0]

    def __str__(self) -> str:
        return self.label
