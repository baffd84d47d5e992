"""Extension aliasing for change invalidation."""

from collections.abc import Iterable

from sitedeps.core.constants import ALIAS_GROUPS


def expand_aliases(
    extensions: Iterable[str],
    groups: Iterable[frozenset[str]] = ALIAS_GROUPS,
) -> frozenset[str]:
    """Close a set of extensions over the alias groups.

    Any group sharing at least one extension with the input is added whole;
    extensions outside every group pass through unchanged. Expanding an
    already expanded set returns it unchanged.

    Example:
        >>> sorted(expand_aliases({".scss", ".js"}))
        ['.js', '.sass', '.scss']
    """
    result = set(extensions)
    for group in groups:
        if not result.isdisjoint(group):
            result |= group
    return frozenset(result)
