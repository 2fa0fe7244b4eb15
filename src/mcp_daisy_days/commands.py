"""Editor slash-command front end over the documentation index and generator."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from mcp_daisy_days.errors import NotFoundError, UnknownArchetypeError, UnknownConceptError
from mcp_daisy_days.index import DEFAULT_SEARCH_LIMIT
from mcp_daisy_days.loader import Corpus
from mcp_daisy_days.models import ConceptEntry

logger = logging.getLogger(__name__)

DEFAULT_LAYOUT = "saas"
COMPLETION_LIMIT = 20


class CommandError(Exception):
    """A slash command failed; the message is shown to the user as is."""


@dataclass
class SlashCommandOutputSection:
    """A labelled character range of command output."""

    start: int
    end: int
    label: str


@dataclass
class SlashCommandOutput:
    """Text returned to the editor, with optional foldable sections."""

    text: str
    sections: list[SlashCommandOutputSection] = field(default_factory=list)


@dataclass
class ArgumentCompletion:
    """A suggested argument for a slash command."""

    label: str
    new_text: str
    run_command: bool = True


def format_concept(concept: ConceptEntry) -> str:
    """Render a concept as Markdown for display."""
    parts = [
        f"## {concept.title}",
        f"**Description:** {concept.description}",
        f"**Classes:** {', '.join(concept.style_rules)}",
    ]
    if concept.suggestion:
        parts.append(f"**Suggestion:** {concept.suggestion}")
    if concept.snippet:
        parts.append(f"```html\n{concept.snippet}\n```")
    return "\n\n".join(parts)


def _single_section(text: str, label: str) -> SlashCommandOutput:
    """Wrap text in output with one section spanning all of it."""
    return SlashCommandOutput(text=text, sections=[SlashCommandOutputSection(0, len(text), label)])


class SlashCommandHandler:
    """Translates ``/daisy-*`` commands into core calls and renders the results."""

    def __init__(self, corpus: Corpus, search_limit: int = DEFAULT_SEARCH_LIMIT) -> None:
        """Initialise handler.

        Args:
            corpus: Loaded corpus shared with other front ends.
            search_limit: Maximum number of search results to show.
        """
        self.corpus = corpus
        self.search_limit = search_limit
        self._handlers: dict[str, Callable[[list[str]], SlashCommandOutput]] = {
            "daisy-search": self._search,
            "daisy-doc": self._doc,
            "daisy-components": self._components,
            "daisy-concept": self._concept,
            "daisy-concepts": self._concepts,
            "daisy-layout": self._layout,
            "daisy-layouts": self._layouts,
        }

    @property
    def commands(self) -> list[str]:
        """Return the supported command names."""
        return list(self._handlers)

    def run(self, command: str, args: Sequence[str] = ()) -> SlashCommandOutput:
        """Run a slash command.

        Args:
            command: Command name, with or without the leading slash.
            args: Whitespace-separated command arguments.

        Returns:
            Output to display in the editor.

        Raises:
            CommandError: If the command is unknown, arguments are missing, or
                the core rejected the request.
        """
        name = command.strip().lstrip("/")
        handler = self._handlers.get(name)
        if handler is None:
            msg = f"Unknown command: {name}"
            raise CommandError(msg)
        logger.debug("Running /%s with %d argument(s)", name, len(args))
        return handler([arg for arg in args if arg.strip()])

    def complete(self, command: str) -> list[ArgumentCompletion]:
        """Suggest arguments for a slash command.

        Args:
            command: Command name, with or without the leading slash.

        Returns:
            Completions, empty for commands that take no named argument.
        """
        name = command.strip().lstrip("/")
        if name == "daisy-layout":
            values = self.corpus.registry.archetypes()
        elif name == "daisy-concept":
            values = self.corpus.catalog.names()
        elif name == "daisy-doc":
            values = [entry.name for entry in self.corpus.index.list_all()[:COMPLETION_LIMIT]]
        else:
            values = []
        return [ArgumentCompletion(label=value, new_text=value) for value in values]

    def _search(self, args: list[str]) -> SlashCommandOutput:
        """Handle /daisy-search QUERY..."""
        query = " ".join(args)
        if not query:
            msg = "Please provide a search query"
            raise CommandError(msg)

        results = self.corpus.index.search(query, self.search_limit)
        if not results:
            return SlashCommandOutput(text=f"No results found for '{query}'")

        lines = []
        for result in results:
            entry = self.corpus.index.lookup(result.entry_name)
            lines.append(f"- **{entry.title}** (score: {result.score}): {entry.summary}")
        text = f"## Search Results for '{query}'\n\n" + "\n".join(lines)
        return _single_section(text, "Search Results")

    def _doc(self, args: list[str]) -> SlashCommandOutput:
        """Handle /daisy-doc NAME."""
        name = " ".join(args)
        if not name:
            msg = "Please provide a component name"
            raise CommandError(msg)

        try:
            entry = self.corpus.index.lookup(name)
        except NotFoundError:
            msg = f"Documentation not found for '{name}'"
            raise CommandError(msg) from None

        text = f"## {entry.title}\n\n*{entry.category}*\n\n{entry.body}"
        return _single_section(text, f"Doc: {entry.title}")

    def _components(self, args: list[str]) -> SlashCommandOutput:
        """Handle /daisy-components."""
        by_category: dict[str, list[str]] = {}
        for entry in self.corpus.index.list_all():
            by_category.setdefault(entry.category, []).append(entry.name)

        groups = [f"### {category}\n\n{', '.join(names)}" for category, names in sorted(by_category.items())]
        text = "## DaisyUI Components\n\n" + "\n\n".join(groups)
        return _single_section(text, "Components List")

    def _concept(self, args: list[str]) -> SlashCommandOutput:
        """Handle /daisy-concept NAME."""
        name = " ".join(args)
        if not name:
            msg = "Please provide a concept name"
            raise CommandError(msg)

        try:
            concept = self.corpus.catalog.lookup(name)
        except NotFoundError:
            available = ", ".join(self.corpus.catalog.names())
            msg = f"Concept '{name}' not found. Available: {available}"
            raise CommandError(msg) from None

        return _single_section(format_concept(concept), f"Concept: {concept.title}")

    def _concepts(self, args: list[str]) -> SlashCommandOutput:
        """Handle /daisy-concepts."""
        text = "## Design Concepts\n\n" + ", ".join(self.corpus.catalog.names())
        return _single_section(text, "Concepts List")

    def _layout(self, args: list[str]) -> SlashCommandOutput:
        """Handle /daisy-layout [type] [title words...] [+concept ...]."""
        if args and not args[0].startswith("+"):
            layout, rest = args[0], args[1:]
        else:
            layout, rest = DEFAULT_LAYOUT, args
        concepts = [arg[1:] for arg in rest if arg.startswith("+") and len(arg) > 1]
        title = " ".join(arg for arg in rest if not arg.startswith("+")) or None

        try:
            document = self.corpus.generator.generate(layout, title, concepts)
        except UnknownArchetypeError:
            available = ", ".join(self.corpus.registry.archetypes())
            msg = f"Unknown layout '{layout}'. Available: {available}"
            raise CommandError(msg) from None
        except UnknownConceptError as e:
            available = ", ".join(self.corpus.catalog.names())
            msg = f"Unknown concept '{e.name}'. Available: {available}"
            raise CommandError(msg) from None

        archetype = document.archetype.value
        text = f"## Generated {archetype} Layout\n\n```html\n{document.html}```"
        return _single_section(text, f"Layout: {archetype}")

    def _layouts(self, args: list[str]) -> SlashCommandOutput:
        """Handle /daisy-layouts."""
        text = "## Available Layouts\n\n" + ", ".join(self.corpus.registry.archetypes())
        return _single_section(text, "Layouts List")
