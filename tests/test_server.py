"""Tests for the MCP server tools."""

import json

import pytest
from mcp.server.fastmcp.exceptions import ToolError

import mcp_daisy_days.server as mcp_mod
from mcp_daisy_days.config import Config
from mcp_daisy_days.loader import Corpus
from mcp_daisy_days.server import (
    generate_layout,
    generate_theme,
    get_concept,
    get_documentation,
    idea_to_ui,
    list_components,
    list_concepts,
    list_layout_types,
    mcp,
    scaffold_form,
    search_documentation,
)


@pytest.fixture(autouse=True)
def server_corpus(corpus: Corpus, monkeypatch: pytest.MonkeyPatch) -> Corpus:
    """Point the server at the small test corpus with default config.

    Args:
        corpus: Test corpus fixture.
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        The corpus the tools will use.
    """
    monkeypatch.setattr(mcp_mod, "_corpus", corpus)
    monkeypatch.setattr(mcp_mod, "_config", Config())
    return corpus


def test_all_tools_registered() -> None:
    """Test that every tool is registered with FastMCP."""
    registered = set(mcp._tool_manager._tools.keys())

    assert registered == {
        "search_documentation",
        "get_documentation",
        "list_components",
        "get_concept",
        "list_concepts",
        "generate_layout",
        "list_layout_types",
        "idea_to_ui",
        "generate_theme",
        "scaffold_form",
    }


def test_search_documentation() -> None:
    """Test that search returns ranked JSON results."""
    results = json.loads(search_documentation("button"))

    assert [result["name"] for result in results] == ["button", "iconbutton"]
    assert results[0]["score"] == 3
    assert results[0]["matched_tags"] == ["button"]
    assert results[0]["title"] == "Button"


def test_search_uses_configured_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that the config's limit applies when none is given."""
    monkeypatch.setattr(mcp_mod, "_config", Config(search_limit=1))

    assert len(json.loads(search_documentation("button"))) == 1
    assert len(json.loads(search_documentation("button", limit=5))) == 2


def test_search_invalid_limit() -> None:
    """Test that a bad limit is a tool error naming the argument."""
    with pytest.raises(ToolError, match="InvalidArgument: limit"):
        search_documentation("button", limit=0)


def test_get_documentation() -> None:
    """Test fetching one component's documentation."""
    doc = json.loads(get_documentation("Card"))

    assert doc["name"] == "card"
    assert doc["category"] == "Data display"
    assert doc["body"] == "Cards group and display content."


def test_get_documentation_not_found() -> None:
    """Test that unknown components are a tool error."""
    with pytest.raises(ToolError, match="NotFound: unicorn"):
        get_documentation("unicorn")


def test_list_components() -> None:
    """Test listing all components."""
    names = [component["name"] for component in json.loads(list_components())]

    assert names == ["alert", "badge", "button", "card", "iconbutton"]


def test_get_concept() -> None:
    """Test fetching a concept."""
    concept = json.loads(get_concept("darkmode"))

    assert concept["title"] == "Dark Mode"
    assert concept["style_rules"] == ["data-theme=dark", "bg-base-100"]
    assert concept["snippet"] is None


def test_get_concept_not_found() -> None:
    """Test that unknown concepts are a tool error."""
    with pytest.raises(ToolError, match="NotFound: brutalism"):
        get_concept("brutalism")


def test_list_concepts() -> None:
    """Test listing concepts."""
    assert [concept["name"] for concept in json.loads(list_concepts())] == ["darkmode", "glassmorphism"]


def test_generate_layout() -> None:
    """Test that layouts are returned as HTML."""
    html = generate_layout("dashboard", "Ops", ["glassmorphism"])

    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Ops</title>" in html
    assert "lg:drawer-open glass backdrop-blur" in html


def test_generate_layout_unknown_type() -> None:
    """Test that unknown layouts are a tool error."""
    with pytest.raises(ToolError, match="UnknownArchetype: portfolio"):
        generate_layout("portfolio")


def test_generate_layout_unknown_concept() -> None:
    """Test that unknown concepts are a tool error."""
    with pytest.raises(ToolError, match="UnknownConcept: neon"):
        generate_layout("saas", concepts=["neon"])


def test_list_layout_types() -> None:
    """Test listing the layout types."""
    layouts = json.loads(list_layout_types())

    assert len(layouts) == 10
    assert layouts[0] == "saas"


def test_idea_to_ui() -> None:
    """Test generating a layout from an idea."""
    html = idea_to_ui("an email client in darkmode")

    assert 'data-layout="inbox"' in html
    assert 'data-theme="dark"' in html
    assert "<title>Mail</title>" in html


def test_reload_corpus_swaps_reference(server_corpus: Corpus) -> None:
    """Test that reloading replaces the shared corpus."""
    reloaded = mcp_mod.reload_corpus()

    assert reloaded is not server_corpus
    assert mcp_mod._corpus is reloaded
    assert len(reloaded.index) == 57


def test_generate_theme_tool() -> None:
    """Test generating a theme block through the tool."""
    css = generate_theme("brand", primary="#4f46e5")

    assert css.startswith('@plugin "daisyui/theme" {')
    assert "--color-primary: #4f46e5;" in css


def test_generate_theme_invalid_name() -> None:
    """Test that a bad theme name is a tool error."""
    with pytest.raises(ToolError, match="InvalidArgument: name"):
        generate_theme("my theme")


def test_scaffold_form_tool() -> None:
    """Test generating a form through the tool."""
    markup = scaffold_form("Signup", ["Email", "<Password>"])

    assert "Signup</h2>" in markup
    assert 'name="&lt;Password&gt;"' in markup


def test_scaffold_form_blank_field() -> None:
    """Test that a blank field name is a tool error."""
    with pytest.raises(ToolError, match="InvalidArgument: fields"):
        scaffold_form("Signup", [" "])
