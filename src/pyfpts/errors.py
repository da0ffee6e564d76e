"""Exceptions raised by the scoring engine."""

from __future__ import annotations


class ScoringError(Exception):
    """Base class for every caller-visible scoring failure."""


class UnsupportedSportError(ScoringError, LookupError):
    def __init__(self, sport: object):
        self.sport = sport
        super().__init__(f"No scoring configuration registered for sport={sport!r}")


class InvalidBoosterEffectError(ScoringError, ValueError):
    def __init__(self, message: str, effect: object | None = None):
        super().__init__(message)
        self.message = message
        self.effect = effect


class ConfigurationInconsistencyError(ScoringError, ValueError):
    """Schema and weight table for a sport disagree."""

    def __init__(self, message: str, sport: object | None = None, problems: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.sport = sport
        self.problems = problems or []
