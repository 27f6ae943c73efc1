"""Error taxonomy for the screening engine."""


class ScreeningError(Exception):
    """Base class for all screening failures."""


class UnsupportedFormatError(ScreeningError):
    """A document's declared format is not one the extractor handles."""

    def __init__(self, declared_format: str, name: str = "") -> None:
        self.declared_format = declared_format
        self.name = name
        label = f"'{declared_format}'" if declared_format else "(none)"
        super().__init__(f"Unsupported file format {label}" + (f" for {name}" if name else ""))


class InvalidRequestError(ScreeningError):
    """Job description missing or no resumes submitted."""


class InternalProcessingError(ScreeningError):
    """Unexpected failure while extracting or scoring."""
