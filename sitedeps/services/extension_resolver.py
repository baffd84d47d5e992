"""Extension chain resolution for files rendered through template engines.

A source file such as ``index.html.haml.erb`` is processed by ERB, then by
Haml, and finally served as HTML. Its extension chain lists the template layers
outer-most first and ends with the residual extension that is left once no
further layer is recognized: ``(".erb", ".haml", ".html")``.
"""

import os
from collections.abc import Callable, Iterable

from sitedeps.core.types import ExtensionChain, TemplateRegistry


def _extname(name: str) -> str:
    return os.path.splitext(name)[1]


class ExtensionSetRegistry:
    """Template registry backed by a fixed set of extensions.

    Stands in for a full template engine registry when the set of template
    extensions is known up front.
    """

    def __init__(self, extensions: Iterable[str]):
        self._extensions = frozenset(
            ext if ext.startswith(".") else f".{ext}" for ext in extensions if ext
        )

    def is_template_extension(self, ext: str) -> bool:
        return ext in self._extensions

    def __repr__(self) -> str:
        return f"ExtensionSetRegistry({sorted(self._extensions)!r})"


class ExtensionChainResolver:
    """Decomposes file names into template layers and a residual extension."""

    def __init__(self, registry: TemplateRegistry):
        self._registry = registry

    @property
    def registry(self) -> TemplateRegistry:
        return self._registry

    def step_through_extensions(
        self, name: str, visit: Callable[[str], None] | None = None
    ) -> str:
        """Strip template extensions from ``name`` while the registry knows them.

        Each stripped extension is passed to ``visit``, followed by the
        residual extension of what remains (possibly empty).

        Args:
            name: File name or path
            visit: Optional callback receiving each extension in order

        Returns:
            ``name`` with its template extensions removed
        """
        while True:
            ext = _extname(name)
            if not ext or not self._registry.is_template_extension(ext):
                break

            if visit is not None:
                visit(ext)

            name = name[: -len(ext)]

        if visit is not None:
            visit(_extname(name))

        return name

    def remove_templating_extensions(self, name: str) -> str:
        """Remove the templating extensions, keeping the others."""
        return self.step_through_extensions(name)

    def resolve(self, name: str) -> ExtensionChain:
        """Return the extension chain of ``name``."""
        chain: list[str] = []
        self.step_through_extensions(name, chain.append)
        return tuple(chain)
