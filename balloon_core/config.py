"""
Balloon Configuration
=====================
Configuration constants and environment variables.
"""

import os
from typing import Optional

# Underlying primitive, selected by name (see hashing.registry)
HASH_TYPE = os.getenv("BALLOON_HASH_TYPE", "sha256")

# Lane execution for the M-core variant: "thread", "process" or "serial"
PARALLEL_BACKEND = os.getenv("BALLOON_PARALLEL_BACKEND", "thread")
MAX_WORKERS: Optional[int] = (
    int(os.getenv("BALLOON_MAX_WORKERS")) if os.getenv("BALLOON_MAX_WORKERS") else None
)

LOG_LEVEL = os.getenv("BALLOON_LOG_LEVEL", "INFO")

# Default neighbours mixed per block when callers don't pass delta
DELTA = 3

# Recommended parameters used by balloon_hash / balloon_m_hash
DEFAULT_SPACE_COST = 16
DEFAULT_TIME_COST = 20
DEFAULT_DELTA = 4
DEFAULT_PARALLEL_COST = 4
