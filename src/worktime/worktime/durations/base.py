from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ..core.enums import ReferencePolicy, SessionFlag
from ..core.exceptions import ValidationError
from ..sessions.model import Session


class DurationCalculator(ABC):
    """Calculator interface (Strategy Pattern for session durations)."""

    @abstractmethod
    def minutes(self, session: Session, reference_instant: datetime) -> int:
        raise NotImplementedError


def reference_for(session: Session, policy: ReferencePolicy, now: Optional[datetime] = None) -> datetime:
    """Instant that closes an open session for duration purposes.

    Historical views use the row's own write time so reopening a past report
    never changes it; live views use the caller's clock. Only the current
    open session runs to ``now``: abandoned and inverted ones stop at their
    own write time under either policy.
    """
    if session.has_flag(SessionFlag.ABANDONED_OPEN) or session.has_flag(SessionFlag.INVERTED_CHECKOUT):
        return session.recorded_at
    if policy == ReferencePolicy.LIVE:
        if now is None:
            raise ValidationError("LIVE reference policy needs the current instant")
        return now
    return session.recorded_at
