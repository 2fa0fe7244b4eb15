"""Loads the embedded daisyUI corpus into the in-memory indexes."""

import logging
from dataclasses import dataclass, field
from functools import cached_property
from importlib import resources
from pathlib import Path

from mcp_daisy_days.catalog import ConceptCatalog
from mcp_daisy_days.config import Config
from mcp_daisy_days.generator import LayoutGenerator
from mcp_daisy_days.index import DocumentationIndex
from mcp_daisy_days.parser import CorpusParser
from mcp_daisy_days.templates import LayoutTemplateRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Corpus:
    """Everything the front ends need, built once and shared by reference."""

    index: DocumentationIndex
    catalog: ConceptCatalog
    registry: LayoutTemplateRegistry = field(default_factory=LayoutTemplateRegistry)

    @cached_property
    def generator(self) -> LayoutGenerator:
        """Return the generator bound to this corpus, created on first use."""
        return LayoutGenerator(self.catalog, self.registry)


class CorpusLoader:
    """Parses corpus sources into a populated Corpus."""

    CORPUS_PACKAGE = "mcp_daisy_days"
    CORPUS_DIR = "corpus"
    COMPONENTS_FILE = "components.rst"
    CONCEPTS_FILE = "concepts.rst"

    def __init__(self) -> None:
        """Initialise loader with a corpus parser."""
        self.parser = CorpusParser()

    def load(
        self,
        components_source: str,
        concepts_source: str,
        components_name: str = COMPONENTS_FILE,
        concepts_name: str = CONCEPTS_FILE,
    ) -> Corpus:
        """Build a corpus from raw reStructuredText sources.

        Args:
            components_source: Component documentation source.
            concepts_source: Design concept source.
            components_name: Name of the component source, used in errors.
            concepts_name: Name of the concept source, used in errors.

        Returns:
            Populated Corpus.

        Raises:
            CorpusFormatError: If either source contains a malformed record.
        """
        entries = self.parser.parse_components(components_source, components_name)
        concepts = self.parser.parse_concepts(concepts_source, concepts_name)
        corpus = Corpus(index=DocumentationIndex(entries), catalog=ConceptCatalog(concepts))
        logger.info("Loaded %d components and %d concepts", len(corpus.index), len(corpus.catalog))
        return corpus

    def load_from_paths(self, components_path: Path, concepts_path: Path) -> Corpus:
        """Build a corpus from files on disk.

        Args:
            components_path: Path to the component documentation file.
            concepts_path: Path to the design concept file.

        Returns:
            Populated Corpus.

        Raises:
            ValueError: If either path does not exist.
            CorpusFormatError: If either file contains a malformed record.
        """
        for path in (components_path, concepts_path):
            if not path.exists():
                msg = f"Corpus path does not exist: {path}"
                raise ValueError(msg)

        logger.debug("Reading corpus from %s and %s", components_path, concepts_path)
        return self.load(
            components_path.read_text(encoding="utf-8"),
            concepts_path.read_text(encoding="utf-8"),
            str(components_path),
            str(concepts_path),
        )

    def load_default(self) -> Corpus:
        """Build the corpus shipped inside the package.

        Returns:
            Populated Corpus.
        """
        corpus_dir = resources.files(self.CORPUS_PACKAGE) / self.CORPUS_DIR
        logger.debug("Reading packaged corpus from %s", corpus_dir)
        return self.load(
            (corpus_dir / self.COMPONENTS_FILE).read_text(encoding="utf-8"),
            (corpus_dir / self.CONCEPTS_FILE).read_text(encoding="utf-8"),
        )

    def load_configured(self, config: Config) -> Corpus:
        """Build the corpus named by the configuration.

        Args:
            config: Loaded configuration.

        Returns:
            The override corpus when both paths are configured, otherwise the
            packaged corpus.
        """
        paths = config.resolved_corpus_paths
        if paths is None:
            return self.load_default()
        return self.load_from_paths(*paths)
