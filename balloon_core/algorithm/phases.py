"""
Balloon Phases
==============
Expand, mix and extract.

Each phase takes the running counter and returns it advanced, so the
counter of one lane never leaks into another.
"""

from ..exceptions import InvalidParameterError
from ..hashing import Hasher, bytes_to_int
from .buffer import BlockBuffer


def expand(hasher: Hasher, buf: BlockBuffer, counter: int, space_cost: int) -> int:
    """
    Fill the buffer from its seed block.

    Block s is the hash of block s-1, for s in 1..space_cost-1.

    Returns:
        The counter after the last expand call
    """
    for s in range(1, space_cost):
        buf.append(hasher(counter, buf[s - 1]))
        counter += 1
    return counter


def mix(
    hasher: Hasher,
    buf: BlockBuffer,
    counter: int,
    salt: bytes,
    space_cost: int,
    time_cost: int,
    delta: int,
) -> int:
    """
    Rewrite every block time_cost times.

    Each rewrite hashes the block with its left neighbour (block 0 reads
    the last block), then folds in delta further blocks whose indices
    come from hashing the round, block and neighbour numbers. Block s
    sees the already-updated block s-1 of the same round.

    Returns:
        The counter after the last mix call
    """
    for t in range(time_cost):
        for s in range(space_cost):
            buf[s] = hasher(counter, buf.previous(s), buf[s])
            counter += 1
            for i in range(delta):
                # Neighbour selection keys on (t, s, i), not on the counter
                idx_block = hasher(t, s, i)
                other = bytes_to_int(hasher(counter, salt, idx_block)) % space_cost
                counter += 1
                buf[s] = hasher(counter, buf[s], buf[other])
                counter += 1
    return counter


def extract(buf: BlockBuffer) -> bytes:
    """Return the last block of the buffer."""
    if not len(buf):
        raise InvalidParameterError("space_cost", 0, "Cannot extract from an empty buffer")
    return buf.last
