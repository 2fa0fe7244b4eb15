"""Tests for corpus loading."""

from pathlib import Path

import pytest

from mcp_daisy_days.config import Config
from mcp_daisy_days.errors import CorpusFormatError
from mcp_daisy_days.loader import CorpusLoader


@pytest.fixture
def corpus_files(tmp_path: Path, components_source: str, concepts_source: str) -> tuple[Path, Path]:
    """Write the test corpus to disk.

    Args:
        tmp_path: Pytest temporary directory fixture.
        components_source: Component corpus fixture.
        concepts_source: Concept corpus fixture.

    Returns:
        Paths of the component and concept files.
    """
    components_path = tmp_path / "components.rst"
    concepts_path = tmp_path / "concepts.rst"
    components_path.write_text(components_source, encoding="utf-8")
    concepts_path.write_text(concepts_source, encoding="utf-8")
    return components_path, concepts_path


def test_load_default() -> None:
    """Test loading the corpus shipped with the package."""
    corpus = CorpusLoader().load_default()

    assert len(corpus.index) == 57
    assert len(corpus.catalog) == 6
    assert corpus.index.lookup("button").category == "Actions"
    assert corpus.generator is corpus.generator


def test_load_from_paths(corpus_files: tuple[Path, Path]) -> None:
    """Test loading a corpus from files on disk."""
    corpus = CorpusLoader().load_from_paths(*corpus_files)

    assert len(corpus.index) == 5
    assert corpus.catalog.names() == ["darkmode", "glassmorphism"]


def test_load_from_missing_path(tmp_path: Path, corpus_files: tuple[Path, Path]) -> None:
    """Test that a missing corpus file is reported."""
    with pytest.raises(ValueError, match="does not exist"):
        CorpusLoader().load_from_paths(tmp_path / "missing.rst", corpus_files[1])


def test_load_reports_source_name(concepts_source: str) -> None:
    """Test that format errors name the offending source."""
    with pytest.raises(CorpusFormatError) as exc_info:
        CorpusLoader().load(".. no-such-directive::\n", concepts_source, components_name="custom.rst")

    assert exc_info.value.record == "custom.rst"


def test_load_configured_override(corpus_files: tuple[Path, Path]) -> None:
    """Test that configured paths replace the packaged corpus."""
    components_path, concepts_path = corpus_files
    config = Config(components_path=str(components_path), concepts_path=str(concepts_path))

    corpus = CorpusLoader().load_configured(config)

    assert len(corpus.index) == 5


def test_load_configured_needs_both_paths(corpus_files: tuple[Path, Path]) -> None:
    """Test that a single configured path falls back to the packaged corpus."""
    config = Config(components_path=str(corpus_files[0]))

    corpus = CorpusLoader().load_configured(config)

    assert len(corpus.index) == 57
