"""ViewRegistry: hand out revocable views over one shared storage record.

The registry keeps each issued view's token in a weak-keyed map, so a
view that the caller drops disappears from the registry on its own,
while the registry can still revoke any view that is alive.

Usage:
    registry = ViewRegistry()
    view = registry.issue()
    view.write("theme", "dark")
    registry.revoke(view)    # True; view now raises ViewRevoked
    registry.revoke(view)    # False; already forgotten
"""
from __future__ import annotations

import logging
import weakref
from collections.abc import MutableMapping
from typing import Any

from fieldguard.domain.config import ViewConfig
from fieldguard.domain.record import Record
from fieldguard.domain.types import Key, PrivacyPredicate
from fieldguard.view.access_view import AccessControlledView, create_revocable
from fieldguard.view.revocation import RevocationToken

log = logging.getLogger(__name__)


class ViewRegistry:
    """Issuer of revocable views sharing one storage record.

    Args:
        storage: backing record for every issued view (default: a new
            empty Record owned by the registry)
        is_private: privacy predicate applied by every issued view
        config: ViewConfig applied by every issued view
    """

    def __init__(
        self,
        storage: MutableMapping[Key, Any] | None = None,
        is_private: PrivacyPredicate | None = None,
        *,
        config: ViewConfig | None = None,
    ) -> None:
        self._storage = storage if storage is not None else Record()
        self._is_private = is_private
        self._config = config
        self._tokens: weakref.WeakKeyDictionary[AccessControlledView, RevocationToken] = (
            weakref.WeakKeyDictionary()
        )

    @property
    def storage(self) -> MutableMapping[Key, Any]:
        return self._storage

    def issue(self) -> AccessControlledView:
        """Create a new revocable view over the shared storage."""
        view, token = create_revocable(
            self._storage, self._is_private, config=self._config,
        )
        self._tokens[view] = token
        log.info("issued view %s", view.view_id)
        return view

    def revoke(self, view: AccessControlledView) -> bool:
        """Revoke and forget one issued view.

        Returns False if the view was not issued here, was already
        revoked through the registry, or had already revoked itself by
        reaching its violation limit.
        """
        token = self._tokens.pop(view, None)
        if token is None:
            return False
        return token.revoke()

    def revoke_all(self) -> int:
        """Revoke every live issued view. Returns how many were revoked."""
        views = list(self._tokens.keys())
        count = sum(1 for view in views if self.revoke(view))
        log.info("revoked %d issued views", count)
        return count

    def __contains__(self, view: object) -> bool:
        """True for an issued view that is still active."""
        token = self._tokens.get(view) if view in self._tokens else None
        return token is not None and not token.revoked

    def __len__(self) -> int:
        """Number of issued views still alive and not revoked."""
        return sum(1 for token in self._tokens.values() if not token.revoked)
