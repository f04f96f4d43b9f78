"""
Single-Core Balloon
===================
expand -> mix -> extract over one private buffer.
"""

import time
from typing import Optional, Union

import structlog

from .. import config
from ..hashing import Hasher, default_hasher, to_bytes
from .buffer import BlockBuffer
from .models import BalloonParams
from .phases import expand, mix, extract

logger = structlog.get_logger(__name__)

Secret = Union[str, bytes, bytearray]


def run_lane(
    hasher: Hasher,
    password: Secret,
    salt: bytes,
    params: BalloonParams,
) -> bytes:
    """
    Compute one lane with already validated parameters.

    Module-level so it can be shipped to worker processes.
    """
    buf = BlockBuffer(hasher.digest_size)
    buf.append(hasher(0, password, salt))
    counter = expand(hasher, buf, 1, params.space_cost)
    mix(hasher, buf, counter, salt, params.space_cost, params.time_cost, params.delta)
    return extract(buf)


def balloon(
    password: Secret,
    salt: Secret,
    space_cost: int,
    time_cost: int,
    delta: int = config.DELTA,
    *,
    hasher: Optional[Hasher] = None,
) -> bytes:
    """
    Compute the Balloon hash of a password.

    Args:
        password: Password as text (UTF-8) or bytes
        salt: Salt as text (UTF-8) or bytes
        space_cost: Number of blocks in the buffer
        time_cost: Number of mixing rounds
        delta: Random neighbours mixed into each block per round
        hasher: Primitive adapter (defaults to the configured HASH_TYPE)

    Returns:
        Raw digest bytes. See balloon_hash for a hex string with the
        recommended parameters.

    Raises:
        InvalidParameterError: If any cost is not a positive integer
    """
    params = BalloonParams(space_cost, time_cost, delta)
    hasher = hasher or default_hasher()

    start = time.perf_counter()
    digest = run_lane(hasher, password, to_bytes(salt), params)

    logger.debug(
        "Balloon hash computed",
        hash_type=hasher.name,
        space_cost=space_cost,
        time_cost=time_cost,
        delta=delta,
        duration_ms=round((time.perf_counter() - start) * 1000, 3),
    )
    return digest


def balloon_hash(password: Secret, salt: Secret, *, hasher: Optional[Hasher] = None) -> str:
    """Hex Balloon hash with the recommended parameters (16, 20, delta 4)."""
    return balloon(
        password,
        salt,
        config.DEFAULT_SPACE_COST,
        config.DEFAULT_TIME_COST,
        config.DEFAULT_DELTA,
        hasher=hasher,
    ).hex()
