"""Data models for daisyUI documentation and layout generation."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class Archetype(str, Enum):
    """The closed set of page layouts the generator can produce."""

    SAAS = "saas"
    BLOG = "blog"
    SOCIAL = "social"
    KANBAN = "kanban"
    INBOX = "inbox"
    PROFILE = "profile"
    DOCS = "docs"
    DASHBOARD = "dashboard"
    AUTH = "auth"
    STORE = "store"


@dataclass(frozen=True)
class DocEntry:
    """Represents a single component documentation page."""

    name: str
    title: str
    category: str
    summary: str
    body: str
    tags: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class ConceptEntry:
    """Represents a design concept that can be applied to a layout."""

    name: str
    title: str
    description: str
    style_rules: tuple[str, ...]
    suggestion: str | None = None
    snippet: str | None = None


@dataclass(frozen=True)
class LayoutTemplate:
    """Static structure of one layout archetype."""

    archetype: Archetype
    sections: tuple[str, ...]
    default_title: str
    slot_bindings: Mapping[str, str]
    root_classes: str = ""


@dataclass(frozen=True)
class SearchResult:
    """Represents a search result."""

    entry_name: str
    score: int
    matched_tags: tuple[str, ...]


@dataclass(frozen=True)
class HtmlDocument:
    """A generated, self-contained HTML page."""

    archetype: Archetype
    title: str
    concepts: tuple[str, ...]
    html: str

    def __str__(self) -> str:
        """Return the HTML markup."""
        return self.html
