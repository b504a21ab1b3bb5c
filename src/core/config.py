"""
Configuration constants for the Nim service.

Deployment specific settings are read from environment variables.
Game defaults are fixed: a reset always restores them.
"""

import os
from typing import Optional

# =============================================================================
# Game Configuration
# =============================================================================

DEFAULT_TOTAL_MATCHES = 13
DEFAULT_MAX_MATCHES_PER_TURN = 3

# =============================================================================
# Database Configuration
# =============================================================================

DATABASE_URL = os.environ.get("NIM_DATABASE_URL", "sqlite:///./nim.db")
DATABASE_ECHO = os.environ.get("NIM_DATABASE_ECHO", "0") == "1"

# =============================================================================
# Logging Configuration
# =============================================================================

DEBUG = os.environ.get("NIM_DEBUG", "0") == "1"
LOG_FILE: Optional[str] = os.environ.get("NIM_LOG_FILE")

# =============================================================================
# Computer Player Configuration
# =============================================================================

# Seed for the computer's random moves (unset = nondeterministic)
_seed = os.environ.get("NIM_RANDOM_SEED")
RANDOM_SEED: Optional[int] = int(_seed) if _seed else None
