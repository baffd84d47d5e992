"""Service layer for sitedeps - extension resolution, invalidation and hashing."""

from .alias_expander import expand_aliases
from .content_hasher import (
    ContentHasher,
    DelegatedHashBackend,
    HashBackend,
    LocalHashBackend,
    create_content_hasher,
)
from .extension_memo import ExtensionMemo, MemoStats
from .extension_resolver import ExtensionChainResolver, ExtensionSetRegistry
from .related_files import RelatedFileResolver

__all__ = [
    "ContentHasher",
    "DelegatedHashBackend",
    "ExtensionChainResolver",
    "ExtensionMemo",
    "ExtensionSetRegistry",
    "HashBackend",
    "LocalHashBackend",
    "MemoStats",
    "RelatedFileResolver",
    "create_content_hasher",
    "expand_aliases",
]
