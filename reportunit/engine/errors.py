"""Errors raised while building a report from a result file."""


class ReportParseError(Exception):
    """Base class for result file errors."""


class StructuralError(ReportParseError):
    """A required element or attribute is missing."""

    def __init__(self, message: str, element: str | None = None, attribute: str | None = None):
        super().__init__(message)
        self.element = element
        self.attribute = attribute


class FormatError(ReportParseError, ValueError):
    """A numeric attribute holds a value that is not a number."""

    def __init__(self, element: str, attribute: str, value: str):
        super().__init__(f"<{element}> attribute '{attribute}' is not a number: {value!r}")
        self.element = element
        self.attribute = attribute
        self.value = value
