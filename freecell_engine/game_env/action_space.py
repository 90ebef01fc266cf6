from typing import TypeAlias
from gymnasium import spaces
import numpy as np
import numpy.typing as npt
from ..core.board import Location
from ..core.standard_spec import StandardSpec as Spec

class TupleActionSpace():
    """
    tuple as the freecell action space

    every tuple (source, dest, count - 1) represents moving the top count cards
    of the first location onto the second location

    locations are numbered tableau first, then free cells, then home cells
    """

    _action_type: TypeAlias = npt.NDArray[np.int8]
    num_locations: int = Spec.num_tableau_cells + Spec.num_free_cells + Spec.num_home_cells

    @classmethod
    def get_gym_space(cls) -> spaces.Space:
        return spaces.MultiDiscrete([cls.num_locations, cls.num_locations, len(Spec.ranks)], dtype=np.int8)

    @classmethod
    def parse_action(cls, action: _action_type) -> tuple[Location, Location, int]:
        source, dest = int(action[0]), int(action[1])
        count = int(action[2]) + 1 if len(action) > 2 else 1
        return cls.parse_location(source), cls.parse_location(dest), count

    @classmethod
    def parse_location(cls, location: int) -> Location:
        """
        Map a location number onto a board location

        Raises:
            ValueError: when location is out of range

        Returns:
            Location: board location
        """
        if location < 0 or location >= cls.num_locations:
            raise ValueError(f'location cannot be {location}')
        if location < Spec.num_tableau_cells:
            return Location('tableau', location)
        if location < Spec.num_tableau_cells + Spec.num_free_cells:
            return Location('free', location - Spec.num_tableau_cells)
        return Location('home', location - Spec.num_tableau_cells - Spec.num_free_cells)

    @classmethod
    def location_number(cls, loc: Location) -> int:
        if loc.kind == 'tableau':
            return loc.index
        if loc.kind == 'free':
            return Spec.num_tableau_cells + loc.index
        return Spec.num_tableau_cells + Spec.num_free_cells + loc.index
