"""Core constants for sitedeps."""

# Extensions treated as interchangeable when deciding what a change invalidates.
# A stylesheet partial written in one Sass dialect can be imported by the
# other, and the markup template engines share layouts and partials.
SASS_TYPE_ALIASING: frozenset[str] = frozenset({".scss", ".sass"})
ERB_TYPE_ALIASING: frozenset[str] = frozenset({".erb", ".haml", ".slim"})

ALIAS_GROUPS: tuple[frozenset[str], ...] = (SASS_TYPE_ALIASING, ERB_TYPE_ALIASING)

# Delegated hashing defaults
DEFAULT_HASH_COMMAND = "git hash-object"
DEFAULT_HASH_CHUNK_SIZE = 64 * 1024
