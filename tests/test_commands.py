"""Tests for the editor slash commands."""

import pytest

from mcp_daisy_days.commands import (
    COMPLETION_LIMIT,
    CommandError,
    SlashCommandHandler,
    SlashCommandOutputSection,
)
from mcp_daisy_days.loader import Corpus


@pytest.fixture
def handler(corpus: Corpus) -> SlashCommandHandler:
    """Create a handler over the small test corpus.

    Args:
        corpus: Test corpus fixture.

    Returns:
        SlashCommandHandler instance.
    """
    return SlashCommandHandler(corpus)


def test_commands(handler: SlashCommandHandler) -> None:
    """Test the advertised command names."""
    assert handler.commands == [
        "daisy-search",
        "daisy-doc",
        "daisy-components",
        "daisy-concept",
        "daisy-concepts",
        "daisy-layout",
        "daisy-layouts",
    ]


def test_unknown_command(handler: SlashCommandHandler) -> None:
    """Test that unknown commands are reported."""
    with pytest.raises(CommandError, match="Unknown command: daisy-theme"):
        handler.run("/daisy-theme")


def test_search(handler: SlashCommandHandler) -> None:
    """Test rendering ranked search results."""
    output = handler.run("/daisy-search", ["status"])

    assert output.text == (
        "## Search Results for 'status'\n\n"
        "- **Alert** (score: 1): Alerts inform users about status changes.\n"
        "- **Badge** (score: 1): Badges show the status of data."
    )
    assert output.sections == [SlashCommandOutputSection(0, len(output.text), "Search Results")]


def test_search_respects_limit(corpus: Corpus) -> None:
    """Test that the configured limit caps the listing."""
    output = SlashCommandHandler(corpus, search_limit=1).run("daisy-search", ["button"])

    assert "**Button**" in output.text
    assert "IconButton" not in output.text


def test_search_without_results(handler: SlashCommandHandler) -> None:
    """Test the message shown when nothing matches."""
    output = handler.run("daisy-search", ["unicorn"])

    assert output.text == "No results found for 'unicorn'"
    assert output.sections == []


def test_search_requires_query(handler: SlashCommandHandler) -> None:
    """Test that blank arguments do not count as a query."""
    with pytest.raises(CommandError, match="Please provide a search query"):
        handler.run("daisy-search", ["  "])


def test_doc(handler: SlashCommandHandler) -> None:
    """Test showing a component's documentation."""
    output = handler.run("daisy-doc", ["Button"])

    assert output.text.startswith("## Button\n\n*Actions*\n\nButtons allow the user to take actions.")
    assert output.sections[0].label == "Doc: Button"


def test_doc_not_found(handler: SlashCommandHandler) -> None:
    """Test that unknown components are reported."""
    with pytest.raises(CommandError, match="Documentation not found for 'unicorn'"):
        handler.run("daisy-doc", ["unicorn"])


def test_components(handler: SlashCommandHandler) -> None:
    """Test listing components grouped by category."""
    output = handler.run("daisy-components")

    assert output.text == (
        "## DaisyUI Components\n\n"
        "### Actions\n\nbutton, iconbutton\n\n"
        "### Data display\n\nbadge, card\n\n"
        "### Feedback\n\nalert"
    )


def test_concept(handler: SlashCommandHandler) -> None:
    """Test showing a concept with its classes and example."""
    output = handler.run("daisy-concept", ["glassmorphism"])

    assert output.text.startswith("## Glassmorphism\n\n**Description:** Frosted glass aesthetic.")
    assert "**Classes:** glass, backdrop-blur" in output.text
    assert "**Suggestion:** Apply the glass class to cards." in output.text
    assert '```html\n<div class="card glass">Content</div>\n```' in output.text
    assert output.sections[0].label == "Concept: Glassmorphism"


def test_concept_not_found(handler: SlashCommandHandler) -> None:
    """Test that unknown concepts list the available ones."""
    with pytest.raises(CommandError, match="Concept 'brutalism' not found. Available: darkmode, glassmorphism"):
        handler.run("daisy-concept", ["brutalism"])


def test_concepts(handler: SlashCommandHandler) -> None:
    """Test listing concept names."""
    assert handler.run("daisy-concepts").text == "## Design Concepts\n\ndarkmode, glassmorphism"


def test_layout(handler: SlashCommandHandler) -> None:
    """Test generating a layout with a title and concepts."""
    output = handler.run("/daisy-layout", ["kanban", "Sprint", "Board", "+darkmode"])

    assert output.text.startswith("## Generated kanban Layout\n\n```html\n<!DOCTYPE html>")
    assert output.text.endswith("</html>\n```")
    assert "<title>Sprint Board</title>" in output.text
    assert 'data-theme="dark"' in output.text
    assert output.sections == [SlashCommandOutputSection(0, len(output.text), "Layout: kanban")]


def test_layout_defaults_to_saas(handler: SlashCommandHandler) -> None:
    """Test that a bare command generates the saas layout."""
    output = handler.run("daisy-layout")

    assert output.text.startswith("## Generated saas Layout")
    assert "<title>Launchpad</title>" in output.text


def test_layout_unknown_type(handler: SlashCommandHandler) -> None:
    """Test that unknown layouts list the available ones."""
    with pytest.raises(CommandError, match="Unknown layout 'portfolio'. Available: saas, blog,"):
        handler.run("daisy-layout", ["portfolio"])


def test_layout_unknown_concept(handler: SlashCommandHandler) -> None:
    """Test that unknown concepts list the available ones."""
    with pytest.raises(CommandError, match="Unknown concept 'neon'. Available: darkmode, glassmorphism"):
        handler.run("daisy-layout", ["blog", "+neon"])


def test_layouts(handler: SlashCommandHandler) -> None:
    """Test listing layout types."""
    text = handler.run("daisy-layouts").text

    assert text == (
        "## Available Layouts\n\nsaas, blog, social, kanban, inbox, profile, docs, dashboard, auth, store"
    )


def test_complete_layout(handler: SlashCommandHandler) -> None:
    """Test completing layout types."""
    completions = handler.complete("/daisy-layout")

    assert [completion.label for completion in completions][:3] == ["saas", "blog", "social"]
    assert len(completions) == 10
    assert all(completion.run_command for completion in completions)


def test_complete_concept(handler: SlashCommandHandler) -> None:
    """Test completing concept names."""
    assert [completion.new_text for completion in handler.complete("daisy-concept")] == ["darkmode", "glassmorphism"]


def test_complete_doc_is_capped(default_corpus: Corpus) -> None:
    """Test that component completions stop at the cap."""
    completions = SlashCommandHandler(default_corpus).complete("daisy-doc")

    assert len(completions) == COMPLETION_LIMIT
    assert completions[0].label == "accordion"


def test_complete_without_arguments(handler: SlashCommandHandler) -> None:
    """Test commands that offer no completions."""
    assert handler.complete("daisy-search") == []


def test_layout_with_only_concepts_defaults_to_saas(handler: SlashCommandHandler) -> None:
    """Test that a leading +concept is not taken for the layout type."""
    output = handler.run("daisy-layout", ["+glassmorphism", "Acme"])

    assert output.text.startswith("## Generated saas Layout")
    assert "<title>Acme</title>" in output.text
    assert "glass backdrop-blur" in output.text
