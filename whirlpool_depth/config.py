"""
Configuration settings for the tradable-liquidity report

Loads environment variables and provides simulation configuration.
"""
import os
from dotenv import load_dotenv

from .constants import MIN_TICK_INDEX as PROTOCOL_MIN_TICK_INDEX, MAX_TICK_INDEX as PROTOCOL_MAX_TICK_INDEX

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Simulation settings"""

    # Per-step simulator
    MAX_STEPS: int = int(os.getenv("WHIRLPOOL_MAX_STEPS", 10))

    # Tick arrays loaded on each side of the current one
    NEIGHBORING_TICK_ARRAYS: int = int(os.getenv("WHIRLPOOL_NEIGHBORING_TICK_ARRAYS", 10))

    # Traversal tick bounds (may only narrow the protocol range)
    MIN_TICK_INDEX: int = int(os.getenv("WHIRLPOOL_MIN_TICK_INDEX", PROTOCOL_MIN_TICK_INDEX))
    MAX_TICK_INDEX: int = int(os.getenv("WHIRLPOOL_MAX_TICK_INDEX", PROTOCOL_MAX_TICK_INDEX))

    # Logging
    LOG_LEVEL: str = os.getenv("WHIRLPOOL_LOG_LEVEL", "INFO").upper()

    def __init__(self, **overrides):
        """Override class defaults per instance, e.g. Settings(MAX_STEPS=5)"""
        for name, value in overrides.items():
            if not hasattr(Settings, name) or name.startswith("_"):
                raise AttributeError(f"Unknown setting: {name}")
            setattr(self, name, value)
        if self.MAX_STEPS < 0:
            raise ValueError(f"MAX_STEPS must be >= 0, got {self.MAX_STEPS}")
        if self.NEIGHBORING_TICK_ARRAYS < 0:
            raise ValueError(f"NEIGHBORING_TICK_ARRAYS must be >= 0, got {self.NEIGHBORING_TICK_ARRAYS}")
        if self.MIN_TICK_INDEX < PROTOCOL_MIN_TICK_INDEX or self.MAX_TICK_INDEX > PROTOCOL_MAX_TICK_INDEX:
            raise ValueError(
                f"Tick bounds must stay within [{PROTOCOL_MIN_TICK_INDEX}, {PROTOCOL_MAX_TICK_INDEX}], "
                f"got [{self.MIN_TICK_INDEX}, {self.MAX_TICK_INDEX}]"
            )
        if self.MIN_TICK_INDEX >= self.MAX_TICK_INDEX:
            raise ValueError(
                f"MIN_TICK_INDEX ({self.MIN_TICK_INDEX}) must be below MAX_TICK_INDEX ({self.MAX_TICK_INDEX})"
            )


# Create global settings instance
settings = Settings()
