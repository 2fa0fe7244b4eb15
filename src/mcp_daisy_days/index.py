"""In-memory documentation index with ranked free-text search."""

import re
from collections.abc import Iterable, Iterator
from types import MappingProxyType

from mcp_daisy_days.errors import CorpusFormatError, InvalidArgumentError, NotFoundError
from mcp_daisy_days.models import DocEntry, SearchResult

DEFAULT_SEARCH_LIMIT = 20

# Name hits outrank tag-only hits three to one
NAME_WEIGHT = 3
TAG_WEIGHT = 1

STOPWORDS = frozenset(
    {
        "a",
        "an",
        "and",
        "are",
        "as",
        "at",
        "be",
        "by",
        "for",
        "from",
        "how",
        "in",
        "is",
        "it",
        "of",
        "on",
        "or",
        "that",
        "the",
        "this",
        "to",
        "use",
        "with",
    }
)

_TOKEN_PATTERN = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")


def normalise_name(name: str) -> str:
    """Normalise an entry name for storage and lookup.

    Args:
        name: Raw entry name as written or requested.

    Returns:
        Lower-cased name with surrounding and repeated whitespace collapsed.
    """
    return " ".join(name.split()).lower()


def tokenize(text: str) -> list[str]:
    """Split text into distinct search terms.

    Lower-cases the text, strips punctuation and drops stopwords. Hyphenated
    class names such as ``btn-primary`` are kept as a single term.

    Args:
        text: Free text or query string.

    Returns:
        Distinct terms in order of first appearance.
    """
    terms: list[str] = []
    for token in _TOKEN_PATTERN.findall(text.lower()):
        if token not in STOPWORDS and token not in terms:
            terms.append(token)
    return terms


def expand_terms(terms: Iterable[str]) -> set[str]:
    """Add the parts of hyphenated terms to a term set.

    Args:
        terms: Terms produced by :func:`tokenize`.

    Returns:
        The terms plus every non-stopword part of each hyphenated term.
    """
    expanded: set[str] = set()
    for term in terms:
        expanded.add(term)
        if "-" in term:
            expanded.update(part for part in term.split("-") if part not in STOPWORDS)
    return expanded


class DocumentationIndex:
    """Read-only index of component documentation entries.

    Entries are held in a mapping keyed by normalised name and in an inverted
    mapping keyed by search term. Neither changes after construction, so a
    single instance can be shared between concurrent callers.
    """

    def __init__(self, entries: Iterable[DocEntry]) -> None:
        """Build the index.

        Args:
            entries: Parsed documentation entries, in any order.

        Raises:
            CorpusFormatError: If two entries share a name.
        """
        by_name: dict[str, DocEntry] = {}
        name_terms: dict[str, frozenset[str]] = {}
        postings: dict[str, set[str]] = {}

        for entry in entries:
            if entry.name in by_name:
                raise CorpusFormatError(entry.name, "duplicate entry name")
            by_name[entry.name] = entry
            terms = expand_terms(tokenize(entry.name))
            # "radial progress" is also written as the class-style "radial-progress"
            terms.add("-".join(entry.name.split()))
            name_terms[entry.name] = frozenset(terms)
            for tag in entry.tags | name_terms[entry.name]:
                postings.setdefault(tag, set()).add(entry.name)

        self._entries = MappingProxyType(by_name)
        self._name_terms = MappingProxyType(name_terms)
        self._postings = MappingProxyType({tag: frozenset(names) for tag, names in postings.items()})
        self._sorted_names = tuple(sorted(by_name))

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        """Return whether an entry name exists, ignoring case."""
        return isinstance(name, str) and normalise_name(name) in self._entries

    def __iter__(self) -> Iterator[DocEntry]:
        """Iterate over entries in ascending name order."""
        return iter(self.list_all())

    def lookup(self, name: str) -> DocEntry:
        """Retrieve an entry by name, ignoring case.

        Args:
            name: Entry name.

        Returns:
            The matching DocEntry.

        Raises:
            NotFoundError: If no entry has that name.
        """
        entry = self._entries.get(normalise_name(name))
        if entry is None:
            raise NotFoundError("component", name)
        return entry

    def list_all(self) -> list[DocEntry]:
        """Return every entry in ascending name order."""
        return [self._entries[name] for name in self._sorted_names]

    def search(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[SearchResult]:
        """Rank entries against a free-text query.

        Each distinct query term scores NAME_WEIGHT when it is one of the
        entry's name terms and TAG_WEIGHT when it only appears in the tags.
        Entries with no overlapping term are left out.

        Args:
            query: Free-text search query.
            limit: Maximum number of results.

        Returns:
            Results ordered by descending score, then ascending name.

        Raises:
            InvalidArgumentError: If limit is not a positive integer.
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise InvalidArgumentError("limit", f"must be a positive integer, got {limit!r}")

        terms = tokenize(query)
        if not terms:
            return []

        candidates: set[str] = set()
        for term in terms:
            candidates.update(self._postings.get(term, ()))

        results = []
        for name in candidates:
            tags = self._entries[name].tags
            name_terms = self._name_terms[name]
            score = 0
            matched = []
            for term in terms:
                if term in name_terms:
                    score += NAME_WEIGHT
                elif term in tags:
                    score += TAG_WEIGHT
                else:
                    continue
                matched.append(term)
            if score > 0:
                results.append(SearchResult(entry_name=name, score=score, matched_tags=tuple(matched)))

        results.sort(key=lambda result: (-result.score, result.entry_name))
        return results[:limit]
