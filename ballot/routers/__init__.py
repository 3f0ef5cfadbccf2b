"""API router package."""

from ballot.routers import elections, notifications

__all__ = [
    "elections",
    "notifications",
]
