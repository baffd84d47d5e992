"""sitedeps - incremental rebuild dependency resolution for static sites."""

from sitedeps.core.exceptions import HashDelegationError, HashingError, SiteDepsError
from sitedeps.core.utils.path_utils import all_files_under
from sitedeps.services import (
    ContentHasher,
    ExtensionChainResolver,
    ExtensionMemo,
    ExtensionSetRegistry,
    RelatedFileResolver,
    create_content_hasher,
    expand_aliases,
)

__version__ = "0.1.0"

__all__ = [
    "ContentHasher",
    "ExtensionChainResolver",
    "ExtensionMemo",
    "ExtensionSetRegistry",
    "HashDelegationError",
    "HashingError",
    "RelatedFileResolver",
    "SiteDepsError",
    "all_files_under",
    "create_content_hasher",
    "expand_aliases",
]
