"""
Balloon Models
==============
Cost parameters for the single-core and M-core variants.
"""

from dataclasses import dataclass, fields

from .. import config
from ..exceptions import InvalidParameterError


@dataclass(frozen=True)
class BalloonParams:
    """
    Cost parameters, validated on construction.

    Construction is the fail-fast point: nothing is hashed until a
    BalloonParams instance exists.
    """
    space_cost: int                                   # Blocks in the buffer
    time_cost: int                                    # Mixing rounds
    delta: int = config.DELTA                         # Random neighbours per block per round
    parallel_cost: int = config.DEFAULT_PARALLEL_COST  # Lanes (M-core variant only)

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidParameterError(
                    f.name, value, f"{f.name} must be an int, got {type(value).__name__}"
                )
            if value < 1:
                raise InvalidParameterError(f.name, value)

    @property
    def hash_calls(self) -> int:
        """Primitive calls made by one lane (seed, expand and mix)."""
        return self.space_cost + self.time_cost * self.space_cost * (1 + 3 * self.delta)
