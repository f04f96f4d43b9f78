"""
Block Buffer
============
The memory-hard working set: an ordered list of fixed-size blocks.
"""

from typing import Iterator, List


class BlockBuffer:
    """
    Ordered, mutable sequence of digest-sized blocks.

    Blocks are replaced whole, never edited in place. Index -1 is the
    last block, so previous(0) wraps around to the end of the buffer.
    """

    __slots__ = ("block_size", "_blocks")

    def __init__(self, block_size: int):
        self.block_size = block_size
        self._blocks: List[bytes] = []

    def _check(self, block: bytes) -> bytes:
        if len(block) != self.block_size:
            raise ValueError(
                f"Block must be {self.block_size} bytes, got {len(block)}"
            )
        return block

    def append(self, block: bytes) -> None:
        self._blocks.append(self._check(block))

    def previous(self, index: int) -> bytes:
        """Block before index, wrapping to the last block for index 0."""
        return self._blocks[index - 1]

    @property
    def last(self) -> bytes:
        return self._blocks[-1]

    def __getitem__(self, index: int) -> bytes:
        return self._blocks[index]

    def __setitem__(self, index: int, block: bytes) -> None:
        self._blocks[index] = self._check(block)

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._blocks)

    def __repr__(self) -> str:
        return f"BlockBuffer(block_size={self.block_size}, blocks={len(self._blocks)})"
