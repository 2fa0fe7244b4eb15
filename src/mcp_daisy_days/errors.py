"""Exception hierarchy shared by the documentation index and layout generator."""


class DaisyDaysError(Exception):
    """Base class for all errors raised by the core."""

    kind = "DaisyDaysError"

    def __init__(self, message: str, argument: str | None = None) -> None:
        """Initialise error.

        Args:
            message: Human readable description.
            argument: The offending argument, if any.
        """
        super().__init__(message)
        self.argument = argument


class CorpusFormatError(DaisyDaysError):
    """The embedded corpus could not be parsed into entries."""

    kind = "CorpusFormatError"

    def __init__(self, record: str, reason: str, line: int | None = None) -> None:
        """Initialise corpus format error.

        Args:
            record: Name (or best description) of the first malformed record.
            reason: What is wrong with it.
            line: Source line of the record, when known.
        """
        location = f" (line {line})" if line is not None else ""
        super().__init__(f"Malformed corpus record {record!r}{location}: {reason}", record)
        self.record = record
        self.reason = reason
        self.line = line


class NotFoundError(DaisyDaysError):
    """Lookup of an unknown entry name."""

    kind = "NotFound"

    def __init__(self, entity: str, name: str) -> None:
        """Initialise not found error.

        Args:
            entity: What was looked up, e.g. "component" or "concept".
            name: The requested name.
        """
        super().__init__(f"{entity.capitalize()} not found: {name!r}", name)
        self.entity = entity
        self.name = name


class InvalidArgumentError(DaisyDaysError):
    """A query parameter was rejected before touching the index."""

    kind = "InvalidArgument"

    def __init__(self, argument: str, reason: str) -> None:
        """Initialise invalid argument error.

        Args:
            argument: Name of the rejected parameter.
            reason: Why it was rejected.
        """
        super().__init__(f"Invalid argument {argument}: {reason}", argument)
        self.reason = reason


class GenerationError(DaisyDaysError):
    """Layout generation failed; no document was produced."""

    kind = "GenerationError"


class UnknownArchetypeError(GenerationError):
    """The requested layout archetype does not exist."""

    kind = "UnknownArchetype"

    def __init__(self, name: str) -> None:
        """Initialise unknown archetype error.

        Args:
            name: The requested layout type.
        """
        super().__init__(f"Unknown layout type: {name!r}", name)
        self.name = name


class UnknownConceptError(GenerationError):
    """A requested design concept does not exist."""

    kind = "UnknownConcept"

    def __init__(self, name: str) -> None:
        """Initialise unknown concept error.

        Args:
            name: The requested concept name.
        """
        super().__init__(f"Unknown concept: {name!r}", name)
        self.name = name
