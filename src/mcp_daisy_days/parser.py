"""Parser for the reStructuredText documentation corpus."""

import docutils.frontend  # type: ignore[import-untyped]
import docutils.nodes  # type: ignore[import-untyped]
import docutils.parsers.rst  # type: ignore[import-untyped]
import docutils.utils  # type: ignore[import-untyped]

from mcp_daisy_days.errors import CorpusFormatError
from mcp_daisy_days.index import expand_terms, normalise_name, tokenize
from mcp_daisy_days.models import ConceptEntry, DocEntry

# docutils system message levels: 2 warning, 3 error, 4 severe
_ERROR_LEVEL = 3


class BodyTextVisitor(docutils.nodes.GenericNodeVisitor):  # type: ignore[misc]
    """Visitor to render an entry body as display text."""

    def __init__(self, document: docutils.nodes.document) -> None:
        """Initialise body text visitor.

        Args:
            document: Docutils document tree.
        """
        super().__init__(document)
        self._blocks: list[str] = []

    def visit_paragraph(self, node: docutils.nodes.paragraph) -> None:
        """Render a paragraph, keeping inline literals in backticks.

        Args:
            node: Paragraph node.

        Raises:
            docutils.nodes.SkipNode: Children are already rendered.
        """
        self._blocks.append(_inline_text(node))
        raise docutils.nodes.SkipNode

    def visit_literal_block(self, node: docutils.nodes.literal_block) -> None:
        """Render a code example as a fenced block.

        Args:
            node: Literal block node.

        Raises:
            docutils.nodes.SkipNode: Always raised after rendering.
        """
        self._blocks.append(f"```html\n{node.astext()}\n```")
        raise docutils.nodes.SkipNode

    def visit_bullet_list(self, node: docutils.nodes.bullet_list) -> None:
        """Render a bullet list one item per line.

        Args:
            node: Bullet list node.

        Raises:
            docutils.nodes.SkipNode: Items are already rendered.
        """
        self._blocks.append("\n".join(f"- {_inline_text(item)}" for item in node.children))
        raise docutils.nodes.SkipNode

    def visit_field_list(self, node: docutils.nodes.field_list) -> None:
        """Skip field lists, they hold metadata rather than body text.

        Args:
            node: Field list node.

        Raises:
            docutils.nodes.SkipNode: Always raised to skip metadata.
        """
        raise docutils.nodes.SkipNode

    def visit_comment(self, node: docutils.nodes.comment) -> None:
        """Skip comments.

        Args:
            node: Comment node.

        Raises:
            docutils.nodes.SkipNode: Always raised to skip comments.
        """
        raise docutils.nodes.SkipNode

    def visit_system_message(self, node: docutils.nodes.system_message) -> None:
        """Skip parser warnings.

        Args:
            node: System message node.

        Raises:
            docutils.nodes.SkipNode: Always raised to skip messages.
        """
        raise docutils.nodes.SkipNode

    def default_visit(self, node: docutils.nodes.Node) -> None:
        """Default visit handler (no-op).

        Args:
            node: Any node.
        """

    def default_departure(self, node: docutils.nodes.Node) -> None:
        """Default departure handler (no-op).

        Args:
            node: Any node.
        """

    def get_text(self) -> str:
        """Get rendered body text.

        Returns:
            Blocks separated by blank lines.
        """
        return "\n\n".join(block for block in self._blocks if block)


class SearchTextVisitor(docutils.nodes.GenericNodeVisitor):  # type: ignore[misc]
    """Visitor to extract searchable prose, skipping code examples."""

    def __init__(self, document: docutils.nodes.document) -> None:
        """Initialise search text visitor.

        Args:
            document: Docutils document tree.
        """
        super().__init__(document)
        self._text_parts: list[str] = []

    def visit_literal_block(self, node: docutils.nodes.literal_block) -> None:
        """Skip code blocks.

        Args:
            node: Literal block node.

        Raises:
            docutils.nodes.SkipNode: Always raised to skip code blocks.
        """
        raise docutils.nodes.SkipNode

    def visit_comment(self, node: docutils.nodes.comment) -> None:
        """Skip comments.

        Args:
            node: Comment node.

        Raises:
            docutils.nodes.SkipNode: Always raised to skip comments.
        """
        raise docutils.nodes.SkipNode

    def visit_system_message(self, node: docutils.nodes.system_message) -> None:
        """Skip parser warnings.

        Args:
            node: System message node.

        Raises:
            docutils.nodes.SkipNode: Always raised to skip messages.
        """
        raise docutils.nodes.SkipNode

    def visit_Text(self, node: docutils.nodes.Text) -> None:  # noqa: N802
        """Visit text node and collect content.

        Args:
            node: Text node.
        """
        text = node.astext().strip()
        if text:
            self._text_parts.append(text)

    def default_visit(self, node: docutils.nodes.Node) -> None:
        """Default visit handler (no-op).

        Args:
            node: Any node.
        """

    def default_departure(self, node: docutils.nodes.Node) -> None:
        """Default departure handler (no-op).

        Args:
            node: Any node.
        """

    def get_text(self) -> str:
        """Get collected text content.

        Returns:
            Concatenated text content.
        """
        return " ".join(self._text_parts)


def _inline_text(node: docutils.nodes.Node) -> str:
    """Flatten an inline container to text, marking literals with backticks."""
    parts = []
    for child in node.children:
        if isinstance(child, docutils.nodes.literal):
            parts.append(f"`{child.astext()}`")
        elif isinstance(child, docutils.nodes.strong):
            parts.append(f"**{child.astext()}**")
        elif isinstance(child, docutils.nodes.paragraph):
            parts.append(f" {_inline_text(child)} ")
        else:
            parts.append(child.astext())
    return " ".join("".join(parts).split())


class CorpusParser:
    """Parses the component and concept corpora into immutable entries.

    The component corpus uses top-level sections as categories and their
    subsections as entries. The concept corpus uses top-level sections as
    concepts, each carrying ``:title:``, ``:style:`` and ``:suggestion:``
    fields.
    """

    def parse_components(self, source: str, source_name: str = "components.rst") -> list[DocEntry]:
        """Parse the component corpus.

        Args:
            source: reStructuredText source.
            source_name: Name used in error messages.

        Returns:
            DocEntry instances in corpus order.

        Raises:
            CorpusFormatError: On the first malformed category or entry.
        """
        doctree = self._parse_rst(source, source_name)
        entries: list[DocEntry] = []
        seen: set[str] = set()

        for category_node in self._sections(doctree):
            category = category_node[0].astext().strip()
            subsections = self._sections(category_node)
            if not subsections:
                raise CorpusFormatError(category, "category has no entries", self._line(category_node))

            for section in subsections:
                title, name = self._section_name(section)
                if name in seen:
                    raise CorpusFormatError(title, "duplicate entry name", self._line(section))
                seen.add(name)

                body_nodes = self._body_nodes(section)
                body = self._render_body(doctree, body_nodes)
                if not body:
                    raise CorpusFormatError(title, "entry has no body", self._line(section))

                search_text = self._extract_text_content(doctree, body_nodes)
                tags = expand_terms(tokenize(f"{name} {category} {search_text}"))
                entries.append(
                    DocEntry(
                        name=name,
                        title=title,
                        category=category,
                        summary=self._first_paragraph(body_nodes),
                        body=body,
                        tags=frozenset(tags),
                    )
                )

        return entries

    def parse_concepts(self, source: str, source_name: str = "concepts.rst") -> list[ConceptEntry]:
        """Parse the concept corpus.

        Args:
            source: reStructuredText source.
            source_name: Name used in error messages.

        Returns:
            ConceptEntry instances in corpus order.

        Raises:
            CorpusFormatError: On the first malformed concept.
        """
        doctree = self._parse_rst(source, source_name)
        concepts: list[ConceptEntry] = []
        seen: set[str] = set()

        for section in self._sections(doctree):
            title, name = self._section_name(section)
            if name in seen:
                raise CorpusFormatError(title, "duplicate concept name", self._line(section))
            seen.add(name)

            body_nodes = self._body_nodes(section)
            fields = self._extract_fields(body_nodes)
            description = self._first_paragraph(body_nodes)
            if not description:
                raise CorpusFormatError(title, "concept has no description", self._line(section))

            style_rules = tuple(rule.strip() for rule in fields.get("style", "").split(",") if rule.strip())
            if not style_rules:
                raise CorpusFormatError(title, "concept has no style rules", self._line(section))

            snippet = next(
                (node.astext() for node in body_nodes if isinstance(node, docutils.nodes.literal_block)),
                None,
            )
            concepts.append(
                ConceptEntry(
                    name=name,
                    title=fields.get("title") or title,
                    description=description,
                    style_rules=style_rules,
                    suggestion=fields.get("suggestion"),
                    snippet=snippet,
                )
            )

        return concepts

    def _parse_rst(self, source: str, source_name: str) -> docutils.nodes.document:
        """Parse RST source into docutils document tree.

        Args:
            source: RST source text.
            source_name: Name of the source (for error reporting).

        Returns:
            Docutils document tree.

        Raises:
            CorpusFormatError: If docutils reported an error while parsing. The
                error names the enclosing section, or the source when the
                problem sits outside any section.
        """
        parser = docutils.parsers.rst.Parser()
        settings = docutils.frontend.get_default_settings(docutils.parsers.rst.Parser)
        settings.report_level = 5  # Suppress stderr output
        settings.halt_level = 5  # Collect problems as nodes instead of raising
        document = docutils.utils.new_document(source_name, settings)
        parser.parse(source, document)

        for message in document.findall(docutils.nodes.system_message):
            if message["level"] >= _ERROR_LEVEL:
                text = message[0].astext() if message.children else message.astext()
                record = self._enclosing_title(message) or source_name
                raise CorpusFormatError(record, text, message.get("line"))

        return document

    @staticmethod
    def _enclosing_title(node: docutils.nodes.Node) -> str | None:
        """Return the title of the innermost section containing a node.

        Args:
            node: Any node of the document tree.

        Returns:
            Section title, or None for nodes outside every section.
        """
        parent = node.parent
        while parent is not None:
            if isinstance(parent, docutils.nodes.section) and parent.children:
                return parent[0].astext().strip()
            parent = parent.parent
        return None

    @staticmethod
    def _sections(node: docutils.nodes.Element) -> list[docutils.nodes.section]:
        """Return the direct child sections of a node."""
        return [child for child in node.children if isinstance(child, docutils.nodes.section)]

    @staticmethod
    def _body_nodes(section: docutils.nodes.section) -> list[docutils.nodes.Node]:
        """Return the children of a section that are neither its title nor subsections."""
        return [
            child
            for child in section.children
            if not isinstance(child, (docutils.nodes.title, docutils.nodes.section))
        ]

    @staticmethod
    def _line(section: docutils.nodes.section) -> int | None:
        """Best-effort source line for a section."""
        return section[0].line if section.children else None

    def _section_name(self, section: docutils.nodes.section) -> tuple[str, str]:
        """Extract display title and normalised name from a section.

        Args:
            section: Section node.

        Returns:
            Tuple of (title, name).

        Raises:
            CorpusFormatError: If the title contains no usable name.
        """
        title = section[0].astext().strip()
        name = normalise_name(title)
        if not any(char.isalnum() for char in name):
            raise CorpusFormatError(title, "entry has no name", self._line(section))
        return title, name

    @staticmethod
    def _first_paragraph(body_nodes: list[docutils.nodes.Node]) -> str:
        """Return the first paragraph's text, or an empty string."""
        for node in body_nodes:
            if isinstance(node, docutils.nodes.paragraph):
                return " ".join(node.astext().split())
        return ""

    @staticmethod
    def _extract_fields(body_nodes: list[docutils.nodes.Node]) -> dict[str, str]:
        """Collect field list entries as a lower-cased name to text mapping."""
        fields: dict[str, str] = {}
        for node in body_nodes:
            if isinstance(node, docutils.nodes.field_list):
                for field in node.children:
                    name = field[0].astext().strip().lower()
                    fields[name] = " ".join(field[1].astext().split())
        return fields

    @staticmethod
    def _render_body(doctree: docutils.nodes.document, body_nodes: list[docutils.nodes.Node]) -> str:
        """Render the body of an entry as display text.

        Args:
            doctree: Docutils document tree.
            body_nodes: Body nodes of the entry.

        Returns:
            Rendered body, empty when the entry has no content.
        """
        visitor = BodyTextVisitor(doctree)
        for node in body_nodes:
            node.walk(visitor)
        return visitor.get_text()

    @staticmethod
    def _extract_text_content(doctree: docutils.nodes.document, body_nodes: list[docutils.nodes.Node]) -> str:
        """Extract searchable text content from the body of an entry.

        Args:
            doctree: Docutils document tree.
            body_nodes: Body nodes of the entry.

        Returns:
            Extracted prose, without code examples.
        """
        visitor = SearchTextVisitor(doctree)
        for node in body_nodes:
            node.walk(visitor)
        return visitor.get_text()
