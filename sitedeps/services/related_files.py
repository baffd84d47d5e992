"""Related file resolution for incremental rebuilds.

When source files change, resources built from files sharing an extension with
them may need re-rendering too: a changed layout or partial is not itself an
output, but every page that renders through the same template engine might
include it. Alias groups widen the match so that editing a ``.scss`` partial
also invalidates ``.sass`` sources and editing a ``.haml`` partial invalidates
``.erb`` and ``.slim`` sources.
"""

from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from sitedeps.core.constants import ALIAS_GROUPS
from sitedeps.core.types import ResourceRef, TemplateRegistry
from sitedeps.services.alias_expander import expand_aliases
from sitedeps.services.extension_memo import ExtensionMemo
from sitedeps.services.extension_resolver import ExtensionChainResolver


class RelatedFileResolver:
    """Finds resources made stale by a set of changed source files."""

    def __init__(
        self,
        memo: ExtensionMemo,
        alias_groups: Iterable[frozenset[str]] = ALIAS_GROUPS,
    ):
        """Initialize the resolver.

        Args:
            memo: Extension memo shared for the current build run
            alias_groups: Groups of mutually substitutable extensions
        """
        self._memo = memo
        self._alias_groups = tuple(alias_groups)

    @classmethod
    def for_registry(cls, registry: TemplateRegistry) -> "RelatedFileResolver":
        """Create a resolver with a fresh memo over ``registry``."""
        return cls(ExtensionMemo(ExtensionChainResolver(registry)))

    @property
    def memo(self) -> ExtensionMemo:
        return self._memo

    def expanded_extensions(self, paths: Iterable[str | Path]) -> frozenset[str]:
        """Alias-expanded union of the extension chains of ``paths``."""
        extensions: set[str] = set()
        for path in paths:
            extensions.update(self._memo.extensions_of(path))
        return expand_aliases(extensions, self._alias_groups)

    def find_related(
        self,
        changed: Iterable[str | Path],
        candidates: Iterable[ResourceRef],
    ) -> list[Path]:
        """Find files which should also be considered dirty when ``changed`` are touched.

        Args:
            changed: Paths of the source files that changed
            candidates: Site map resources, already filtered of ignored ones

        Returns:
            Backing files of the related resources, in candidate order. The
            changed files themselves are never included.
        """
        changed_set = {Path(path) for path in changed}
        if not changed_set:
            return []

        all_extensions = self.expanded_extensions(changed_set)

        related: list[Path] = []
        candidate_count = 0
        for resource in candidates:
            candidate_count += 1
            source_file = resource.source_file
            if source_file is None:
                continue

            source_path = Path(source_file)
            if source_path in changed_set:
                continue

            local_extensions = self.expanded_extensions([source_path])
            if not all_extensions.isdisjoint(local_extensions):
                related.append(source_path)

        logger.debug(
            f"Related files: {len(related)} of {candidate_count} candidates "
            f"for {len(changed_set)} changed file(s) {sorted(all_extensions)}"
        )
        return related
