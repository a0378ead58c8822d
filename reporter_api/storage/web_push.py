"""Storage for web push subscriptions."""

from __future__ import annotations

import zlib

from sqlmodel import Session, select

from ..core.exceptions import DuplicateError, NotFoundError
from ..models import User, WebPushSubscription
from .base import save


def crc32_of(endpoint: str) -> int:
    return zlib.crc32(endpoint.encode("utf-8"))


class WebPushStorage:
    def __init__(self, session: Session):
        self.session = session

    def create_a_subscription(self, subscription: WebPushSubscription) -> WebPushSubscription:
        """Insert a subscription; an endpoint that is already stored is a 409.

        The owner is checked first so the only constraint left to trip on
        commit is the unique endpoint.
        """

        if subscription.user_id is not None and self.session.get(
            User, subscription.user_id
        ) is None:
            raise NotFoundError("User not found")
        subscription.crc32_endpoint = crc32_of(subscription.endpoint)
        return save(
            self.session,
            subscription,
            context="storage.web_push.create_a_subscription",
            on_conflict=DuplicateError,
        )

    def get_a_subscription(self, endpoint: str) -> WebPushSubscription:
        # The checksum column is indexed; the endpoint comparison settles collisions.
        subscription = self.session.exec(
            select(WebPushSubscription).where(
                WebPushSubscription.crc32_endpoint == crc32_of(endpoint),
                WebPushSubscription.endpoint == endpoint,
            )
        ).first()
        if subscription is None:
            raise NotFoundError("Subscription not found")
        return subscription


__all__ = ["WebPushStorage", "crc32_of"]
