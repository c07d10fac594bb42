from .models import ConversationEntry, ConversationLog, StoreRole
from .roles import to_api_role, to_store_role
from .store import ConversationStore, LoadResult, LoadStatus

__all__ = [
    "ConversationEntry",
    "ConversationLog",
    "ConversationStore",
    "LoadResult",
    "LoadStatus",
    "StoreRole",
    "to_api_role",
    "to_store_role",
]
