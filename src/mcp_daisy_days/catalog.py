"""Catalog of design concepts that can be applied to generated layouts."""

from collections.abc import Iterable
from types import MappingProxyType

from mcp_daisy_days.errors import CorpusFormatError, NotFoundError
from mcp_daisy_days.index import normalise_name
from mcp_daisy_days.models import ConceptEntry


class ConceptCatalog:
    """Read-only mapping of concept name to ConceptEntry.

    The concept set is small and enumerable, so there is no free-text search;
    callers pick exact names from :meth:`list_all`.
    """

    def __init__(self, concepts: Iterable[ConceptEntry]) -> None:
        """Build the catalog.

        Args:
            concepts: Parsed concepts, in any order.

        Raises:
            CorpusFormatError: If two concepts share a name.
        """
        by_name: dict[str, ConceptEntry] = {}
        for concept in concepts:
            if concept.name in by_name:
                raise CorpusFormatError(concept.name, "duplicate concept name")
            by_name[concept.name] = concept
        self._concepts = MappingProxyType(by_name)
        self._sorted_names = tuple(sorted(by_name))

    def __len__(self) -> int:
        """Return the number of concepts."""
        return len(self._concepts)

    def __contains__(self, name: object) -> bool:
        """Return whether a concept name exists, ignoring case."""
        return isinstance(name, str) and normalise_name(name) in self._concepts

    def lookup(self, name: str) -> ConceptEntry:
        """Retrieve a concept by name, ignoring case.

        Args:
            name: Concept name, e.g. ``glassmorphism``.

        Returns:
            The matching ConceptEntry.

        Raises:
            NotFoundError: If the concept does not exist.
        """
        concept = self._concepts.get(normalise_name(name))
        if concept is None:
            raise NotFoundError("concept", name)
        return concept

    def list_all(self) -> list[ConceptEntry]:
        """Return every concept in ascending name order."""
        return [self._concepts[name] for name in self._sorted_names]

    def names(self) -> list[str]:
        """Return concept names in ascending order."""
        return list(self._sorted_names)
