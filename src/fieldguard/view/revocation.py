"""Revocation: the flag shared by a view and its token, and the token itself.

A revocable view and its token share one RevocationFlag. The view checks
the flag at the top of every operation; the token is the only public way
to flip it. The flag belongs to the pair, never to the record, so other
views over the same record keep working.

State transitions:
    ACTIVE → REVOKED   (terminal)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum, auto

from fieldguard.domain.types import ViewId

log = logging.getLogger(__name__)


class ViewState(Enum):
    ACTIVE = auto()
    REVOKED = auto()


@dataclass(slots=True)
class RevocationFlag:
    """Mutable state shared by one view and its token."""
    state: ViewState = ViewState.ACTIVE
    revoked_at: datetime | None = None

    @property
    def revoked(self) -> bool:
        return self.state is ViewState.REVOKED

    def revoke(self) -> bool:
        """Move to REVOKED. Returns False if it already was."""
        if self.revoked:
            return False
        self.state = ViewState.REVOKED
        self.revoked_at = datetime.now(timezone.utc)
        return True


class RevocationToken:
    """Capability that permanently disables one paired view.

    revoke() is idempotent: the first call cuts the view off, later
    calls do nothing and return False.
    """

    __slots__ = ("_flag", "_view_id")

    def __init__(self, flag: RevocationFlag, view_id: ViewId) -> None:
        self._flag = flag
        self._view_id = view_id

    @property
    def view_id(self) -> ViewId:
        return self._view_id

    @property
    def revoked(self) -> bool:
        return self._flag.revoked

    def revoke(self) -> bool:
        """Revoke the paired view. True if this call did it."""
        changed = self._flag.revoke()
        if changed:
            log.info("view %s revoked", self._view_id)
        return changed

    def __repr__(self) -> str:
        return f"<RevocationToken view={self._view_id} state={self._flag.state.name}>"

