"""Basename-keyed memo of extension chains.

Extension chains depend only on the suffixes of a file name, so the memo is
keyed by basename: ``src/a/index.html.erb`` and ``src/b/index.html.erb`` share
one entry and the registry is consulted once. If chain resolution ever started
depending on directories or contents this memo would return stale answers.

One memo is meant to live for a single build run and be shared by every
resolver call in that run. Entries are never evicted.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from threading import RLock

from loguru import logger

from sitedeps.core.types import ExtensionChain
from sitedeps.services.extension_resolver import ExtensionChainResolver


@dataclass
class MemoStats:
    """Lookup counters for an ExtensionMemo."""

    hits: int = 0
    misses: int = 0

    @property
    def lookups(self) -> int:
        return self.hits + self.misses


class ExtensionMemo:
    """Thread-safe memo mapping file basenames to extension chains.

    Each basename is computed at most once; concurrent callers for the same
    basename wait on the lock and observe the stored value.
    """

    def __init__(self, resolver: ExtensionChainResolver):
        self._resolver = resolver
        self._chains: dict[str, ExtensionChain] = {}
        self._lock = RLock()
        self.stats = MemoStats()

    @property
    def resolver(self) -> ExtensionChainResolver:
        return self._resolver

    def extensions_of(self, path: str | Path) -> ExtensionChain:
        """Return the extension chain for the basename of ``path``.

        Hidden files (basename starting with a period) have an empty chain.
        """
        base_name = os.path.basename(str(path))

        with self._lock:
            chain = self._chains.get(base_name)
            if chain is not None:
                self.stats.hits += 1
                return chain

            self.stats.misses += 1
            if base_name.startswith("."):
                chain = ()
            else:
                chain = self._resolver.resolve(base_name)

            self._chains[base_name] = chain
            logger.debug(f"Extension chain for {base_name!r}: {chain}")
            return chain

    def clear(self) -> None:
        """Drop every memoized chain and reset the counters."""
        with self._lock:
            self._chains.clear()
            self.stats = MemoStats()

    def __contains__(self, base_name: object) -> bool:
        with self._lock:
            return base_name in self._chains

    def __len__(self) -> int:
        with self._lock:
            return len(self._chains)
