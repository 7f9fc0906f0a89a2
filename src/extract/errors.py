"""Errors raised while extracting records from an annotation export."""


class ExtractionError(ValueError):
    """Base class for failures turning markup into typed values.

    Attributes:
        field: Semantic field being extracted (e.g. "page", "author")
        message: Human readable description of the unmet expectation
    """

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class StructuralError(ExtractionError):
    """An expected marker element, sub-element or text node is missing."""


class ContentError(ExtractionError):
    """A text node is present but fails its format check."""


class NoteError(ExtractionError):
    """A note element failed extraction under the strict policy.

    Attributes:
        position: 1-based position of the element among note elements
        cause: The underlying structural or content error
    """

    def __init__(self, position: int, cause: ExtractionError):
        super().__init__(cause.field, f"Note #{position}: {cause.message}")
        self.position = position
        self.cause = cause
