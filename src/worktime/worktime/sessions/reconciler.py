from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional

from ..core.enums import SessionFlag
from ..events.model import AttendanceEvent
from .model import Session

logger = logging.getLogger(__name__)


class SessionReconciler:
    """Rebuilds the sessions of one user on one date from partial-update rows.

    The store writes a new row each time a session is touched, so the same
    check-in usually shows up several times: first without a check-out, later
    with one. Rows are collapsed by check-in value; no pairing across
    different check-ins is attempted.

    Anomalies are flagged on the resulting sessions and logged. Nothing is
    merged away or rejected, so an operator can still see and fix them.
    """

    def reconcile(self, events: Iterable[AttendanceEvent]) -> list[Session]:
        # sorted() is stable: rows written at the same instant keep insertion order.
        ordered = sorted(events, key=lambda e: e.recorded_at)

        kept: dict[datetime, AttendanceEvent] = {}
        conflicting: set[datetime] = set()
        for event in ordered:
            if event.check_in is None:
                logger.debug("Ignoring check-out-only row recorded at %s", event.recorded_at)
                continue

            current = kept.get(event.check_in)
            if current is None or current.check_out is None:
                kept[event.check_in] = event
            elif event.check_out is not None and event.check_out != current.check_out:
                conflicting.add(event.check_in)

        drafts: list[tuple[datetime, Optional[datetime], datetime, list[SessionFlag]]] = []
        for check_in in sorted(kept):
            event = kept[check_in]
            flags: list[SessionFlag] = []
            check_out = event.check_out

            if check_in in conflicting:
                flags.append(SessionFlag.CONFLICTING_CHECKOUT)
                logger.warning("Check-in %s has conflicting check-outs; keeping %s", check_in, check_out)

            if check_out is not None and check_out < check_in:
                flags.append(SessionFlag.INVERTED_CHECKOUT)
                logger.warning("Check-out %s precedes check-in %s; treating as a new open session", check_out, check_in)
                check_out = None

            drafts.append((check_in, check_out, event.recorded_at, flags))

        self._flag_overlaps(drafts)
        self._flag_abandoned(drafts)

        return [
            Session(check_in=check_in, check_out=check_out, recorded_at=recorded_at, flags=tuple(flags))
            for check_in, check_out, recorded_at, flags in drafts
        ]

    @staticmethod
    def _flag_overlaps(drafts) -> None:
        latest_end: Optional[datetime] = None
        for check_in, check_out, _, flags in drafts:
            if latest_end is not None and check_in < latest_end:
                flags.append(SessionFlag.OVERLAPPING)
                logger.warning("Session starting %s overlaps a session ending %s", check_in, latest_end)
            if check_out is not None and (latest_end is None or check_out > latest_end):
                latest_end = check_out

    @staticmethod
    def _flag_abandoned(drafts) -> None:
        open_drafts = [d for d in drafts if d[1] is None]
        if len(open_drafts) <= 1:
            return
        logger.warning("%d open sessions on one date; only the latest is treated as current", len(open_drafts))
        for _, _, _, flags in open_drafts[:-1]:
            flags.append(SessionFlag.ABANDONED_OPEN)
