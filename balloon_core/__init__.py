"""
Balloon Core Library
====================
Balloon Hashing: memory-hard password hashing (expand, mix, extract),
its M-core variant and constant-time verification.
"""

__version__ = "0.1.0"

# Errors
from balloon_core.exceptions import (
    BalloonError,
    InvalidParameterError,
    ConfigurationError,
    HashFunctionError,
    EncodingError,
)

# Hashing primitives
from balloon_core.hashing import (
    Hasher,
    available_hash_functions,
    get_hash_function,
    encode_part,
    bytes_to_int,
)

# Algorithm
from balloon_core.algorithm import (
    BalloonParams,
    BlockBuffer,
    expand,
    mix,
    extract,
    balloon,
    balloon_hash,
    balloon_m,
    balloon_m_hash,
    xor_fold,
)

# Verification
from balloon_core.verification import (
    constant_time_compare,
    verify,
    verify_m,
)

# Password helpers
from balloon_core.password import (
    hash_password,
    verify_password,
    hash_password_sync,
    verify_password_sync,
)

# Logging
from balloon_core.log_setup import configure_logging

__all__ = [
    "__version__",
    # Errors
    "BalloonError",
    "InvalidParameterError",
    "ConfigurationError",
    "HashFunctionError",
    "EncodingError",
    # Hashing
    "Hasher",
    "available_hash_functions",
    "get_hash_function",
    "encode_part",
    "bytes_to_int",
    # Algorithm
    "BalloonParams",
    "BlockBuffer",
    "expand",
    "mix",
    "extract",
    "balloon",
    "balloon_hash",
    "balloon_m",
    "balloon_m_hash",
    "xor_fold",
    # Verification
    "constant_time_compare",
    "verify",
    "verify_m",
    # Password helpers
    "hash_password",
    "verify_password",
    "hash_password_sync",
    "verify_password_sync",
    # Logging
    "configure_logging",
]
