"""
M-Core Balloon
==============
Independent single-core lanes with distinct salts, XOR-combined and
finalized with one more hash call.

Lanes share nothing: each owns its buffer and counter. They run on a
concurrent.futures executor and are only combined after all of them
have finished.
"""

import os
import time
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from contextlib import contextmanager
from functools import reduce
from typing import Iterable, Iterator, Optional

import structlog

from .. import config
from ..exceptions import ConfigurationError
from ..hashing import Hasher, default_hasher, encode_part, to_bytes
from .balloon import Secret, run_lane
from .models import BalloonParams

logger = structlog.get_logger(__name__)

POOL_BACKENDS = {
    "thread": ThreadPoolExecutor,
    "process": ProcessPoolExecutor,
}
BACKENDS = (*POOL_BACKENDS, "serial")


def xor_fold(blocks: Iterable[bytes]) -> bytes:
    """
    Byte-wise XOR of equally sized blocks.

    Commutative and associative, so lane completion order doesn't
    matter.
    """
    blocks = list(blocks)
    if not blocks:
        raise ValueError("xor_fold needs at least one block")
    return reduce(lambda a, b: bytes(x ^ y for x, y in zip(a, b)), blocks)


def lane_salts(salt: bytes, parallel_cost: int) -> list:
    """Per-lane salts: salt followed by the 64-bit lane number, 1-based."""
    return [salt + encode_part(p) for p in range(1, parallel_cost + 1)]


@contextmanager
def _lane_executor(parallel_cost: int, executor: Optional[Executor]) -> Iterator[Optional[Executor]]:
    """Yield the executor to run lanes on, or None to run them inline."""
    if executor is not None:
        yield executor
        return

    backend = config.PARALLEL_BACKEND
    if backend == "serial":
        yield None
        return
    if backend not in POOL_BACKENDS:
        logger.error("Unknown parallel backend", backend=backend)
        raise ConfigurationError(
            f"Unknown parallel backend '{backend}'. Available: {', '.join(BACKENDS)}"
        )

    workers = config.MAX_WORKERS or min(parallel_cost, os.cpu_count() or 1)
    with POOL_BACKENDS[backend](max_workers=workers) as pool:
        yield pool


def balloon_m(
    password: Secret,
    salt: Secret,
    space_cost: int,
    time_cost: int,
    parallel_cost: int,
    delta: int = config.DELTA,
    *,
    hasher: Optional[Hasher] = None,
    executor: Optional[Executor] = None,
) -> bytes:
    """
    Compute the M-core Balloon hash of a password.

    Args:
        password: Password as text (UTF-8) or bytes
        salt: Salt as text (UTF-8) or bytes
        space_cost: Number of blocks in each lane's buffer
        time_cost: Number of mixing rounds per lane
        parallel_cost: Number of independent lanes
        delta: Random neighbours mixed into each block per round
        hasher: Primitive adapter (defaults to the configured HASH_TYPE)
        executor: Executor to run lanes on. Left running on return.
            Defaults to a pool built from PARALLEL_BACKEND.

    Returns:
        Raw digest bytes. See balloon_m_hash for a hex string with the
        recommended parameters.

    Raises:
        InvalidParameterError: If any cost is not a positive integer
        ConfigurationError: If PARALLEL_BACKEND is unknown
    """
    params = BalloonParams(space_cost, time_cost, delta, parallel_cost)
    hasher = hasher or default_hasher()
    salt_bytes = to_bytes(salt)

    start = time.perf_counter()
    with _lane_executor(parallel_cost, executor) as pool:
        if pool is None:
            outputs = [
                run_lane(hasher, password, lane_salt, params)
                for lane_salt in lane_salts(salt_bytes, parallel_cost)
            ]
        else:
            futures = [
                pool.submit(run_lane, hasher, password, lane_salt, params)
                for lane_salt in lane_salts(salt_bytes, parallel_cost)
            ]
            outputs = [future.result() for future in futures]

    digest = hasher(password, salt_bytes, xor_fold(outputs))

    logger.debug(
        "Balloon-M hash computed",
        hash_type=hasher.name,
        space_cost=space_cost,
        time_cost=time_cost,
        parallel_cost=parallel_cost,
        delta=delta,
        executor=type(pool).__name__ if pool is not None else "serial",
        duration_ms=round((time.perf_counter() - start) * 1000, 3),
    )
    return digest


def balloon_m_hash(password: Secret, salt: Secret, *, hasher: Optional[Hasher] = None) -> str:
    """Hex M-core Balloon hash with the recommended parameters (16, 20, 4 lanes, delta 4)."""
    return balloon_m(
        password,
        salt,
        config.DEFAULT_SPACE_COST,
        config.DEFAULT_TIME_COST,
        config.DEFAULT_PARALLEL_COST,
        config.DEFAULT_DELTA,
        hasher=hasher,
    ).hex()
