from __future__ import annotations

from hippocampus.llm.base import ApiRole

from .models import StoreRole

_STORE_TO_API: dict[StoreRole, ApiRole] = {
    "system": "system",
    "master": "user",
    "consciousness": "assistant",
}
_API_TO_STORE: dict[ApiRole, StoreRole] = {api: store for store, api in _STORE_TO_API.items()}


def to_api_role(role: StoreRole) -> ApiRole:
    return _STORE_TO_API[role]


def to_store_role(role: ApiRole) -> StoreRole:
    return _API_TO_STORE[role]
