"""
Hash Function Registry
======================
Name to primitive table for the underlying hash function.
"""

import hashlib
from functools import partial
from types import MappingProxyType
from typing import Any, Callable, List, Mapping

import structlog

from ..exceptions import HashFunctionError

logger = structlog.get_logger(__name__)

HashConstructor = Callable[[], Any]

HASH_FUNCTIONS: Mapping[str, HashConstructor] = MappingProxyType({
    name: partial(hashlib.new, name)
    for name in (
        "sha1",
        "sha224",
        "sha256",
        "sha384",
        "sha512",
        "sha3_224",
        "sha3_256",
        "sha3_384",
        "sha3_512",
    )
})


def available_hash_functions() -> List[str]:
    """Names accepted by get_hash_function, sorted."""
    return sorted(HASH_FUNCTIONS)


def get_hash_function(name: str) -> HashConstructor:
    """
    Look up a hash constructor by name.

    Args:
        name: Registry name, e.g. "sha256" or "sha3_256"

    Returns:
        Zero-argument callable returning a fresh hashlib object

    Raises:
        HashFunctionError: If the name is not registered
    """
    try:
        return HASH_FUNCTIONS[name]
    except KeyError:
        logger.error("Unknown hash function", name=name)
        raise HashFunctionError(name, available_hash_functions()) from None
