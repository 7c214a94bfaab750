"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.team import TeamSettings

__all__ = [
    "TeamSettings",
]
