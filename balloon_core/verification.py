"""
Balloon Verification
====================
Recompute a digest and compare it to a stored hex string in constant time.
"""

import hmac
from concurrent.futures import Executor
from typing import Optional

import structlog

from . import config
from .algorithm import balloon, balloon_m
from .algorithm.balloon import Secret
from .hashing import Hasher

logger = structlog.get_logger(__name__)


def constant_time_compare(a: str, b: str) -> bool:
    """
    Compare two strings without short-circuiting on the first mismatch.

    Strings of different length return False straight away, so the
    length itself is not hidden. Digests have a fixed length, so this
    reveals nothing about their content.
    """
    if len(a) != len(b):
        return False
    return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


def verify(
    expected_hex: str,
    password: Secret,
    salt: Secret,
    space_cost: int,
    time_cost: int,
    delta: int = config.DELTA,
    *,
    hasher: Optional[Hasher] = None,
) -> bool:
    """
    Check a password against a hex digest from balloon().

    Args:
        expected_hex: Lowercase hex digest to check against
        password: Candidate password
        salt: Salt the digest was computed with
        space_cost, time_cost, delta: Costs the digest was computed with
        hasher: Primitive adapter (defaults to the configured HASH_TYPE)

    Returns:
        True if the recomputed digest matches

    Raises:
        InvalidParameterError: If any cost is not a positive integer
    """
    computed = balloon(password, salt, space_cost, time_cost, delta, hasher=hasher).hex()
    matched = constant_time_compare(computed, expected_hex)
    if not matched:
        logger.warning("Balloon verification failed", space_cost=space_cost, time_cost=time_cost)
    return matched


def verify_m(
    expected_hex: str,
    password: Secret,
    salt: Secret,
    space_cost: int,
    time_cost: int,
    parallel_cost: int,
    delta: int = config.DELTA,
    *,
    hasher: Optional[Hasher] = None,
    executor: Optional[Executor] = None,
) -> bool:
    """Check a password against a hex digest from balloon_m()."""
    computed = balloon_m(
        password,
        salt,
        space_cost,
        time_cost,
        parallel_cost,
        delta,
        hasher=hasher,
        executor=executor,
    ).hex()
    matched = constant_time_compare(computed, expected_hex)
    if not matched:
        logger.warning(
            "Balloon-M verification failed",
            space_cost=space_cost,
            time_cost=time_cost,
            parallel_cost=parallel_cost,
        )
    return matched
