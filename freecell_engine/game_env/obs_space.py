from typing import TypeAlias
from gymnasium import spaces
import numpy as np
import numpy.typing as npt
from ..core.board import Board
from ..core.card import Card
from ..core.standard_spec import StandardSpec as Spec
from .action_space import TupleActionSpace as ActionSpace

class CompactObsSpace():
    """
    Compact freecell observation space with shape (16, 19)

    one row per location, numbered as in the action space, holding card codes
    (suit * 13 + rank) bottom to top, 0 for no card
    """

    _obs_type: TypeAlias = npt.NDArray[np.int8]

    @classmethod
    def get_gym_space(cls) -> spaces.Space:
        return spaces.Box(
            low=0, high=Spec.num_cards,
            shape=(ActionSpace.num_locations, Spec.max_tableau_len), dtype=np.int8
        )

    @classmethod
    def encode(cls, board: Board) -> _obs_type:
        obs = np.zeros((ActionSpace.num_locations, Spec.max_tableau_len), dtype=np.int8)
        for loc_num in range(ActionSpace.num_locations):
            cards = board.get_cards(ActionSpace.parse_location(loc_num))
            if len(cards) > Spec.max_tableau_len:
                raise ValueError(f'location {loc_num} holds too many cards')
            obs[loc_num, :len(cards)] = [card.code for card in cards]
        return obs

    @classmethod
    def get_cards(cls, obs: _obs_type, loc_num: int) -> list[Card]:
        """Decode the cards of one location, bottom to top"""
        row = obs[loc_num]
        return [Card.from_code(int(code)) for code in row[row != 0]]
