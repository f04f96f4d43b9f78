"""
Balloon Algorithm
=================
Memory-hard expand/mix/extract core and its M-core composition.
"""

from .models import BalloonParams
from .buffer import BlockBuffer
from .phases import expand, mix, extract
from .balloon import balloon, balloon_hash, run_lane
from .parallel import balloon_m, balloon_m_hash, xor_fold, lane_salts

__all__ = [
    # Models
    "BalloonParams",
    "BlockBuffer",
    # Phases
    "expand",
    "mix",
    "extract",
    # Single-core
    "balloon",
    "balloon_hash",
    "run_lane",
    # M-core
    "balloon_m",
    "balloon_m_hash",
    "xor_fold",
    "lane_salts",
]
