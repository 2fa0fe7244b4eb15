"""daisy-days MCP server: daisyUI documentation and layout generation tools."""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from mcp_daisy_days import generator
from mcp_daisy_days.config import Config, load_config
from mcp_daisy_days.errors import DaisyDaysError
from mcp_daisy_days.loader import Corpus, CorpusLoader

mcp = FastMCP("daisy-days")
logger = logging.getLogger(__name__)

_corpus: Corpus | None = None
_config: Config | None = None


def _get_config() -> Config:
    """Return the loaded config, reading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def _get_corpus() -> Corpus:
    """Return the shared corpus, loading it on first use."""
    global _corpus
    if _corpus is None:
        _corpus = CorpusLoader().load_configured(_get_config())
    return _corpus


def reload_corpus() -> Corpus:
    """Build a fresh corpus, then swap it in.

    Calls already holding the previous corpus finish against it unchanged.
    """
    global _corpus
    corpus = CorpusLoader().load_configured(_get_config())
    _corpus = corpus
    logger.info("Corpus reloaded")
    return corpus


def _tool_error(error: DaisyDaysError) -> ToolError:
    """Surface a core error as a tool-call failure naming kind and argument."""
    return ToolError(f"{error.kind}: {error.argument}")


@mcp.tool()
def search_documentation(query: str, limit: Optional[int] = None) -> str:
    """Search daisyUI component documentation. Results are ranked, best match first."""
    corpus = _get_corpus()
    if limit is None:
        limit = _get_config().search_limit
    try:
        results = corpus.index.search(query, limit)
    except DaisyDaysError as e:
        raise _tool_error(e) from e

    payload = []
    for result in results:
        entry = corpus.index.lookup(result.entry_name)
        payload.append(
            {
                "name": entry.name,
                "title": entry.title,
                "category": entry.category,
                "summary": entry.summary,
                "score": result.score,
                "matched_tags": list(result.matched_tags),
            }
        )
    return json.dumps(payload)


@mcp.tool()
def get_documentation(name: str) -> str:
    """Get the full documentation of one daisyUI component, e.g. "button"."""
    try:
        entry = _get_corpus().index.lookup(name)
    except DaisyDaysError as e:
        raise _tool_error(e) from e
    return json.dumps(
        {
            "name": entry.name,
            "title": entry.title,
            "category": entry.category,
            "summary": entry.summary,
            "body": entry.body,
        }
    )


@mcp.tool()
def list_components() -> str:
    """List all documented daisyUI components in alphabetical order."""
    result = [
        {"name": entry.name, "title": entry.title, "category": entry.category, "summary": entry.summary}
        for entry in _get_corpus().index.list_all()
    ]
    return json.dumps(result)


@mcp.tool()
def get_concept(name: str) -> str:
    """Get a design concept (glassmorphism, darkmode, ...) with its classes and an example."""
    try:
        concept = _get_corpus().catalog.lookup(name)
    except DaisyDaysError as e:
        raise _tool_error(e) from e
    return json.dumps(
        {
            "name": concept.name,
            "title": concept.title,
            "description": concept.description,
            "style_rules": list(concept.style_rules),
            "suggestion": concept.suggestion,
            "snippet": concept.snippet,
        }
    )


@mcp.tool()
def list_concepts() -> str:
    """List design concepts that can be applied to generated layouts."""
    result = [
        {"name": concept.name, "title": concept.title, "description": concept.description}
        for concept in _get_corpus().catalog.list_all()
    ]
    return json.dumps(result)


@mcp.tool()
def generate_layout(
    layout_type: str,
    title: Optional[str] = None,
    concepts: Optional[list[str]] = None,
) -> str:
    """Generate a complete HTML page for a layout type, optionally styled with design concepts."""
    try:
        document = _get_corpus().generator.generate(layout_type, title, concepts or [])
    except DaisyDaysError as e:
        raise _tool_error(e) from e
    return document.html


@mcp.tool()
def list_layout_types() -> str:
    """List the layout types accepted by generate_layout."""
    return json.dumps(_get_corpus().registry.archetypes())


@mcp.tool()
def idea_to_ui(prompt: str, title: Optional[str] = None) -> str:
    """Turn a short description of a page into a generated layout."""
    try:
        document = _get_corpus().generator.from_prompt(prompt, title)
    except DaisyDaysError as e:
        raise _tool_error(e) from e
    return document.html


@mcp.tool()
def generate_theme(
    name: str = "mytheme",
    primary: Optional[str] = "#000",
    secondary: Optional[str] = None,
    accent: Optional[str] = None,
    base: Optional[str] = "#fff",
) -> str:
    """Generate a custom daisyUI theme as a CSS @plugin "daisyui/theme" block."""
    try:
        return generator.generate_theme(name, primary, secondary, accent, base)
    except DaisyDaysError as e:
        raise _tool_error(e) from e


@mcp.tool()
def scaffold_form(title: Optional[str] = None, fields: Optional[list[str]] = None) -> str:
    """Generate a daisyUI form card with one text input per field name."""
    try:
        return generator.scaffold_form(title, fields or [])
    except DaisyDaysError as e:
        raise _tool_error(e) from e


def main(config_path: Path | None = None) -> None:
    """Run the server over stdio."""
    global _config
    if config_path is not None:
        _config = load_config(config_path)
    config = _get_config()

    # Logging goes to stderr so stdout stays clean for MCP stdio transport
    logging.basicConfig(
        stream=sys.stderr,
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _get_corpus()
    mcp.run()


if __name__ == "__main__":
    main()
