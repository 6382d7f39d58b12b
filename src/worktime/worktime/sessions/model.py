from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import SessionFlag


@dataclass(frozen=True)
class Session:
    """One reconstructed check-in/check-out pair, or an open check-in."""

    check_in: datetime
    check_out: Optional[datetime]
    recorded_at: datetime
    minutes: Optional[int] = None
    flags: tuple[SessionFlag, ...] = ()

    @property
    def is_open(self) -> bool:
        return self.check_out is None

    def has_flag(self, flag: SessionFlag) -> bool:
        return flag in self.flags
