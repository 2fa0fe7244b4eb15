"""Shared fixtures: a small hand-written corpus and the packaged one."""

import pytest

from mcp_daisy_days.loader import Corpus, CorpusLoader

COMPONENTS_SOURCE = """
Component reference used by the tests.

Actions
=======

Button
------

Buttons allow the user to take actions.

Classes: ``btn``, ``btn-primary``.

Example::

   <button class="btn">Button</button>

IconButton
----------

A square button holding an icon.

Example::

   <button class="btn btn-square">Unicorn</button>

Data display
============

Card
----

Cards group and display content.

Badge
-----

Badges show the status of data.

Feedback
========

Alert
-----

Alerts inform users about status changes.

"""

CONCEPTS_SOURCE = """
glassmorphism
=============

:title: Glassmorphism
:style: glass, backdrop-blur
:suggestion: Apply the glass class to cards.

Frosted glass aesthetic.

Example::

   <div class="card glass">Content</div>

darkmode
========

:title: Dark Mode
:style: data-theme=dark, bg-base-100

Dark color scheme.
"""


@pytest.fixture
def components_source() -> str:
    """Return the test component corpus.

    Returns:
        reStructuredText source with five components in three categories.
    """
    return COMPONENTS_SOURCE


@pytest.fixture
def concepts_source() -> str:
    """Return the test concept corpus.

    Returns:
        reStructuredText source with two concepts.
    """
    return CONCEPTS_SOURCE


@pytest.fixture
def corpus() -> Corpus:
    """Load the small test corpus.

    Returns:
        Corpus built from the test sources.
    """
    return CorpusLoader().load(COMPONENTS_SOURCE, CONCEPTS_SOURCE)


@pytest.fixture(scope="session")
def default_corpus() -> Corpus:
    """Load the corpus shipped with the package once per session.

    Returns:
        Corpus built from the packaged sources.
    """
    return CorpusLoader().load_default()
