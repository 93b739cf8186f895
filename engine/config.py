"""
Centralized configuration for the Golf wager engine.

Configuration is loaded from (in order of precedence):
1. Environment variables
2. .env file (if exists)
3. Default values

Usage:
    from config import config
    print(config.LOG_LEVEL)
    print(config.allowances.net_stroke)
"""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


def get_env(key: str, default: str = "") -> str:
    """Get environment variable with default."""
    return os.environ.get(key, default)


def get_env_int(key: str, default: int = 0) -> int:
    """Get integer environment variable."""
    try:
        return int(os.environ.get(key, str(default)))
    except ValueError:
        return default


def get_env_float(key: str, default: float = 0.0) -> float:
    """Get float environment variable."""
    try:
        return float(os.environ.get(key, str(default)))
    except ValueError:
        return default


@dataclass
class HandicapAllowances:
    """Percentage of the Course Handicap each format plays off."""
    match_play_net: float = 1.0
    net_stroke: float = 0.95

    def to_dict(self) -> dict[str, float]:
        """Get allowances keyed by match format value."""
        return {
            "match_play_net": self.match_play_net,
            "net_stroke": self.net_stroke,
        }


@dataclass
class EngineConfig:
    """Engine configuration."""
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    # Check-in radius around a course's coordinates
    GEOFENCE_RADIUS_METERS: int = 500

    allowances: HandicapAllowances = field(default_factory=HandicapAllowances)

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Load configuration from environment variables."""
        return cls(
            LOG_LEVEL=get_env("LOG_LEVEL", "INFO"),
            ENVIRONMENT=get_env("ENVIRONMENT", "development"),
            GEOFENCE_RADIUS_METERS=get_env_int("GEOFENCE_RADIUS_METERS", 500),
            allowances=HandicapAllowances(
                match_play_net=get_env_float("ALLOWANCE_MATCH_PLAY_NET", 1.0),
                net_stroke=get_env_float("ALLOWANCE_NET_STROKE", 0.95),
            ),
        )


# Global config instance - loaded once at module import
config = EngineConfig.from_env()


def reload_config() -> EngineConfig:
    """
    Reload configuration from environment (useful for testing).

    The global instance is updated in place, so modules that did
    `from config import config` see the new values. Engine code reads
    allowances and the geofence radius from it at call time.
    """
    fresh = EngineConfig.from_env()
    for f in fields(EngineConfig):
        setattr(config, f.name, getattr(fresh, f.name))
    return config
