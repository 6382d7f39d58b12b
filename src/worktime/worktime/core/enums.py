from __future__ import annotations

from enum import Enum


class ReferencePolicy(str, Enum):
    """Which instant stands in for the missing check-out of an open session."""

    LIVE = "LIVE"
    HISTORICAL = "HISTORICAL"


class SessionFlag(str, Enum):
    """Data anomalies found while rebuilding sessions (surfaced, not rejected)."""

    CONFLICTING_CHECKOUT = "CONFLICTING_CHECKOUT"
    INVERTED_CHECKOUT = "INVERTED_CHECKOUT"
    ABANDONED_OPEN = "ABANDONED_OPEN"
    OVERLAPPING = "OVERLAPPING"
