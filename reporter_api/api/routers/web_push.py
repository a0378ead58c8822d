"""Web push subscription endpoints."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Dict, Optional

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from ...models import WebPushSubscription
from ...services.serializers import subscription_to_dict
from ..deps import NO_STORE, WebPushStorageDep, success

router = APIRouter(prefix="/v1/web-push", tags=["web-push"], dependencies=[NO_STORE])


class SubscriptionCreate(BaseModel):
    """Body sent by ``PushSubscription.toJSON()`` plus an optional user id."""

    model_config = ConfigDict(populate_by_name=True)

    endpoint: str = Field(min_length=1)
    keys: Dict[str, str] = Field(default_factory=dict)
    expiration_time: Optional[datetime] = Field(default=None, alias="expirationTime")
    user_id: Optional[int] = None


@router.post("/subscriptions", status_code=201)
def subscribe(body: SubscriptionCreate, storage: WebPushStorageDep):
    subscription = storage.create_a_subscription(
        WebPushSubscription(
            endpoint=body.endpoint,
            keys=json.dumps(body.keys),
            expiration_time=body.expiration_time,
            user_id=body.user_id,
        )
    )
    return success(subscription_to_dict(subscription))


@router.get("/subscriptions")
def get_subscription(endpoint: str, storage: WebPushStorageDep):
    return success(subscription_to_dict(storage.get_a_subscription(endpoint)))


__all__ = ["router"]
