from storefront.client.api import MutationResult, StorefrontApi
from storefront.client.cart import Cart, CartSynchronizer
from storefront.client.session import SessionContext, SessionManager
from storefront.client.storage import JsonFileStore, KeyValueStore, MemoryStore
from storefront.client.view import Storefront, StorefrontView

__all__ = [
    "Cart",
    "CartSynchronizer",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "MutationResult",
    "SessionContext",
    "SessionManager",
    "Storefront",
    "StorefrontApi",
    "StorefrontView",
]
