"""Composes layout templates and design concepts into complete HTML pages."""

import html
import re
from collections.abc import Sequence

from mcp_daisy_days.catalog import ConceptCatalog
from mcp_daisy_days.errors import InvalidArgumentError, NotFoundError, UnknownConceptError
from mcp_daisy_days.models import Archetype, ConceptEntry, HtmlDocument
from mcp_daisy_days.templates import TITLE_PLACEHOLDER, LayoutTemplateRegistry

MAX_TITLE_LENGTH = 100
DEFAULT_THEME = "light"
DEFAULT_THEME_NAME = "mytheme"
DEFAULT_FORM_TITLE = "Form"

DAISYUI_CSS_URL = "https://cdn.jsdelivr.net/npm/daisyui@5"
TAILWIND_BROWSER_URL = "https://cdn.jsdelivr.net/npm/@tailwindcss/browser@4"

_THEME_NAME_PATTERN = re.compile(r"[a-z][a-z0-9-]*")
# Characters that would end a CSS declaration or block early
_CSS_UNSAFE_CHARACTERS = frozenset(";{}\"\\\n")

# Checked in order; the first keyword present in the prompt wins
_KEYWORD_HINTS: tuple[tuple[Archetype, tuple[str, ...]], ...] = (
    (Archetype.BLOG, ("blog", "article", "articles", "news", "magazine")),
    (Archetype.SOCIAL, ("social", "twitter", "feed", "timeline", "community")),
    (Archetype.KANBAN, ("kanban", "trello", "board", "task", "tasks")),
    (Archetype.INBOX, ("mail", "email", "inbox", "message", "messages")),
    (Archetype.PROFILE, ("profile", "settings", "account", "preferences")),
    (Archetype.DOCS, ("docs", "documentation", "wiki", "guide")),
    (Archetype.AUTH, ("login", "signin", "signup", "register", "auth")),
    (Archetype.STORE, ("store", "shop", "ecommerce", "product", "products", "cart")),
    (Archetype.SAAS, ("saas", "startup", "landing")),
    (Archetype.DASHBOARD, ("dashboard", "admin", "analytics", "metrics")),
)


def suggest_archetype(prompt: str) -> Archetype:
    """Pick the archetype that best fits a free-text idea.

    Args:
        prompt: Description of the page, e.g. "a trello clone for my team".

    Returns:
        The first archetype whose keywords appear as whole words, or saas.
    """
    words = set(re.findall(r"\b\w+\b", prompt.lower()))
    for archetype, keywords in _KEYWORD_HINTS:
        if words.intersection(keywords):
            return archetype
    return Archetype.SAAS


def _split_style_rules(concepts: Sequence[ConceptEntry]) -> tuple[list[str], dict[str, str]]:
    """Separate class fragments from ``name=value`` attribute fragments.

    Classes keep request order and duplicates. For attributes, the last
    concept to set a name wins.
    """
    classes: list[str] = []
    attributes: dict[str, str] = {}
    for concept in concepts:
        for rule in concept.style_rules:
            if "=" in rule:
                name, _, value = rule.partition("=")
                attributes[name.strip()] = value.strip().strip("\"'")
            else:
                classes.append(rule)
    return classes, attributes


def _clean_title(title: str | None) -> str:
    """Strip a title and cut it to the maximum length."""
    if title is None:
        return ""
    return title.strip()[:MAX_TITLE_LENGTH].strip()


def generate_theme(
    name: str = DEFAULT_THEME_NAME,
    primary: str | None = "#000",
    secondary: str | None = None,
    accent: str | None = None,
    base: str | None = "#fff",
) -> str:
    """Render a custom daisyUI theme as a CSS ``@plugin`` block.

    Colors that are None or blank are left out, so daisyUI keeps its own
    defaults for them.

    Args:
        name: Theme name, used as the ``data-theme`` value.
        primary: Primary color, any CSS color value.
        secondary: Secondary color.
        accent: Accent color.
        base: Page background color (``--color-base-100``).

    Returns:
        The CSS block, ending with a newline.

    Raises:
        InvalidArgumentError: If the name is not a lower-case identifier or a
            color would break out of its declaration.
    """
    theme_name = name.strip().lower()
    if not _THEME_NAME_PATTERN.fullmatch(theme_name):
        raise InvalidArgumentError("name", f"must start with a letter and hold only a-z, 0-9 or '-', got {name!r}")

    lines = ['@plugin "daisyui/theme" {', f'  name: "{theme_name}";']
    colors = (
        ("primary", "--color-primary", primary),
        ("secondary", "--color-secondary", secondary),
        ("accent", "--color-accent", accent),
        ("base", "--color-base-100", base),
    )
    for argument, variable, value in colors:
        if value is None or not value.strip():
            continue
        if _CSS_UNSAFE_CHARACTERS.intersection(value):
            raise InvalidArgumentError(argument, f"not a CSS color: {value!r}")
        lines.append(f"  {variable}: {value.strip()};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def scaffold_form(title: str | None = None, fields: Sequence[str] = ()) -> str:
    """Render a form card with one text input per field.

    Args:
        title: Form heading; blank titles fall back to "Form".
        fields: Field names, used as both the label and the input name.

    Returns:
        The form markup, ending with a newline.

    Raises:
        InvalidArgumentError: If a field name is blank.
    """
    heading = html.escape(_clean_title(title) or DEFAULT_FORM_TITLE)
    lines = [
        '<div class="card bg-base-100 w-full max-w-sm shadow-2xl">',
        '<form class="card-body">',
        f'  <h2 class="card-title justify-center">{heading}</h2>',
    ]
    for field_name in fields:
        label = " ".join(field_name.split())
        if not label:
            raise InvalidArgumentError("fields", "field names must not be blank")
        escaped = html.escape(label)
        lines.append(
            f'  <fieldset class="fieldset"><legend class="fieldset-legend">{escaped}</legend>'
            f'<input type="text" name="{escaped}" class="input input-bordered w-full" /></fieldset>'
        )
    lines += [
        '  <button class="btn btn-primary mt-6">Submit</button>',
        "</form>",
        "</div>",
    ]
    return "\n".join(lines) + "\n"


class LayoutGenerator:
    """Generates self-contained HTML documents from layout archetypes.

    Generation is a pure function of its arguments and the immutable
    registry and catalog it was built with.
    """

    def __init__(self, catalog: ConceptCatalog, registry: LayoutTemplateRegistry | None = None) -> None:
        """Initialise generator.

        Args:
            catalog: Concept catalog used to resolve concept names.
            registry: Template registry, defaults to the built-in templates.
        """
        self.catalog = catalog
        self.registry = registry or LayoutTemplateRegistry()

    def generate(
        self,
        archetype: str | Archetype,
        title: str | None = None,
        concepts: Sequence[str] = (),
    ) -> HtmlDocument:
        """Render a layout archetype as a complete HTML document.

        Args:
            archetype: One of the ten archetype names.
            title: Page title; blank titles fall back to the template default.
            concepts: Concept names whose style rules are applied in order.

        Returns:
            The generated HtmlDocument.

        Raises:
            UnknownArchetypeError: If the archetype does not exist.
            UnknownConceptError: If any concept does not exist.
        """
        template = self.registry.resolve(archetype)
        resolved = [self._resolve_concept(name) for name in concepts]

        page_title = _clean_title(title) or template.default_title
        escaped_title = html.escape(page_title)
        classes, attributes = _split_style_rules(resolved)

        html_attributes = {"lang": "en", "data-theme": DEFAULT_THEME}
        html_attributes.update(attributes)

        root_classes = " ".join(part for part in (template.root_classes, *classes) if part)
        sections = [
            f"<!-- section: {section} -->\n{template.slot_bindings[section].replace(TITLE_PLACEHOLDER, escaped_title)}"
            for section in template.sections
        ]

        lines = [
            "<!DOCTYPE html>",
            f"<html{self._render_attributes(html_attributes)}>",
            "<head>",
            '<meta charset="utf-8" />',
            '<meta name="viewport" content="width=device-width, initial-scale=1" />',
            f"<title>{escaped_title}</title>",
            f'<link href="{DAISYUI_CSS_URL}" rel="stylesheet" type="text/css" />',
            f'<script src="{TAILWIND_BROWSER_URL}"></script>',
            "</head>",
            "<body>",
            f'<div class="{html.escape(root_classes)}" data-layout="{template.archetype.value}">',
            *sections,
            "</div>",
            "</body>",
            "</html>",
        ]

        return HtmlDocument(
            archetype=template.archetype,
            title=page_title,
            concepts=tuple(concept.name for concept in resolved),
            html="\n".join(lines) + "\n",
        )

    def from_prompt(self, prompt: str, title: str | None = None) -> HtmlDocument:
        """Generate a layout from a free-text idea.

        The archetype comes from :func:`suggest_archetype`; any concept whose
        name appears as a word in the prompt is applied as well.

        Args:
            prompt: Description of the page.
            title: Optional page title.

        Returns:
            The generated HtmlDocument.
        """
        words = set(re.findall(r"\b\w+\b", prompt.lower()))
        concepts = [name for name in self.catalog.names() if name in words]
        return self.generate(suggest_archetype(prompt), title, concepts)

    def _resolve_concept(self, name: str) -> ConceptEntry:
        """Look up a concept, raising the generation error for unknown names."""
        try:
            return self.catalog.lookup(name)
        except NotFoundError:
            raise UnknownConceptError(name) from None

    @staticmethod
    def _render_attributes(attributes: dict[str, str]) -> str:
        """Render attributes as escaped ` name="value"` pairs."""
        return "".join(f' {name}="{html.escape(value)}"' for name, value in attributes.items())
