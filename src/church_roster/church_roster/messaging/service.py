from __future__ import annotations

import logging
import re
from typing import Iterable, Optional, Protocol, Sequence

from ..members.model import Member
from ..members.store import RosterStore

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"\D", re.ASCII)


class MessagingIntent(Protocol):
    """Host collaborator that opens the device's messaging app."""

    def open(self, uri: str) -> None:
        raise NotImplementedError


def build_recipients(members: Sequence[Member], selected_ids: Iterable[int]) -> list[str]:
    """Digits-only phone numbers of the selected members, in roster order."""
    selected = set(selected_ids)
    recipients = []
    for m in members:
        if m.id not in selected:
            continue
        digits = _NON_DIGITS.sub("", m.phone)
        if digits:
            recipients.append(digits)
    return recipients


def sms_uri(recipients: Sequence[str]) -> str:
    return "sms:" + ",".join(recipients)


class NotificationService:
    """Use case: 단체 문자 (bulk text) to the selected members."""

    def __init__(self, store: RosterStore, intent: Optional[MessagingIntent] = None):
        self._store = store
        self._intent = intent

    def send_bulk(self, selected_ids: Iterable[int]) -> Optional[str]:
        """Build the sms: URI and hand it to the intent; None when nothing to send."""
        recipients = build_recipients(self._store.members, selected_ids)
        if not recipients:
            return None

        uri = sms_uri(recipients)
        if self._intent is not None:
            self._intent.open(uri)
        logger.info("Bulk message prepared for %d recipients", len(recipients))
        return uri
