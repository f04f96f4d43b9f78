"""
Balloon Password Hashing
========================
Recommended-parameter helpers, with async variants that run the
CPU-bound hashing in the event loop's default executor.

    digest = await hash_password("hunter42", salt)
    ok = await verify_password(digest, "hunter42", salt)

Passing parallel_cost switches to the M-core variant. Callers own the
salt; nothing here generates or stores one.
"""

import asyncio
from functools import partial
from typing import Optional

from . import config
from .algorithm import balloon, balloon_m
from .algorithm.balloon import Secret
from .verification import verify, verify_m


def hash_password_sync(password: Secret, salt: Secret, parallel_cost: Optional[int] = None) -> str:
    """Hex digest with the recommended costs."""
    if parallel_cost is None:
        digest = balloon(
            password,
            salt,
            config.DEFAULT_SPACE_COST,
            config.DEFAULT_TIME_COST,
            config.DEFAULT_DELTA,
        )
    else:
        digest = balloon_m(
            password,
            salt,
            config.DEFAULT_SPACE_COST,
            config.DEFAULT_TIME_COST,
            parallel_cost,
            config.DEFAULT_DELTA,
        )
    return digest.hex()


def verify_password_sync(
    expected_hex: str,
    password: Secret,
    salt: Secret,
    parallel_cost: Optional[int] = None,
) -> bool:
    """Check a digest produced by hash_password_sync."""
    if parallel_cost is None:
        return verify(
            expected_hex,
            password,
            salt,
            config.DEFAULT_SPACE_COST,
            config.DEFAULT_TIME_COST,
            config.DEFAULT_DELTA,
        )
    return verify_m(
        expected_hex,
        password,
        salt,
        config.DEFAULT_SPACE_COST,
        config.DEFAULT_TIME_COST,
        parallel_cost,
        config.DEFAULT_DELTA,
    )


async def hash_password(password: Secret, salt: Secret, parallel_cost: Optional[int] = None) -> str:
    """
    Hash a password without blocking the event loop.

    Args:
        password: Password as text or bytes
        salt: Salt as text or bytes
        parallel_cost: Lanes for the M-core variant, or None for single-core

    Returns:
        Lowercase hex digest
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None, partial(hash_password_sync, password, salt, parallel_cost)
    )


async def verify_password(
    expected_hex: str,
    password: Secret,
    salt: Secret,
    parallel_cost: Optional[int] = None,
) -> bool:
    """Verify a password without blocking the event loop."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None, partial(verify_password_sync, expected_hex, password, salt, parallel_cost)
    )
