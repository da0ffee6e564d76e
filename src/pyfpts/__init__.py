"""Fantasy points scoring engine."""

from pyfpts.errors import (
    ConfigurationInconsistencyError,
    InvalidBoosterEffectError,
    ScoringError,
    UnsupportedSportError,
)
from pyfpts.scoring import ScoringEngine

__version__ = "0.1.0"

__all__ = [
    "ConfigurationInconsistencyError",
    "InvalidBoosterEffectError",
    "ScoringEngine",
    "ScoringError",
    "UnsupportedSportError",
    "__version__",
]
