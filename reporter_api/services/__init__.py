"""Service layer helpers."""

from .search import AUTHORS_INDEX, POSTS_INDEX, AlgoliaSearchClient
from .serializers import bookmark_to_dict, subscription_to_dict, user_to_dict

__all__ = [
    "AUTHORS_INDEX",
    "AlgoliaSearchClient",
    "POSTS_INDEX",
    "bookmark_to_dict",
    "subscription_to_dict",
    "user_to_dict",
]
