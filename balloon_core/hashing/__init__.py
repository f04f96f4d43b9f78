"""
Hashing Primitives
==================
Hash-function registry, input encoding and the primitive hash adapter.
"""

from .registry import HASH_FUNCTIONS, available_hash_functions, get_hash_function
from .encoding import Part, encode_part, to_bytes, bytes_to_int
from .hasher import Hasher, default_hasher

__all__ = [
    # Registry
    "HASH_FUNCTIONS",
    "available_hash_functions",
    "get_hash_function",
    # Encoding
    "Part",
    "encode_part",
    "to_bytes",
    "bytes_to_int",
    # Adapter
    "Hasher",
    "default_hasher",
]
