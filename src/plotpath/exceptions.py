"""Exception hierarchy for plotpath."""


class PlotPathError(Exception):
    """Base exception for all plotpath errors."""

    pass


class FileAccessError(PlotPathError):
    """Errors related to reading or writing files."""

    pass


class InputReadError(FileAccessError):
    """Error reading an input file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read file '{path}': {reason}")


class OutputWriteError(FileAccessError):
    """Error writing an output file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write file '{path}': {reason}")


class ParseError(PlotPathError):
    """Errors related to parsing input data."""

    pass


class DocumentParseError(ParseError):
    """Malformed source SVG document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot parse SVG '{path}': {reason}")


class FormatParseError(ParseError):
    """Malformed svgcom data."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid svgcom data: {reason}")


class GeometryError(PlotPathError):
    """Errors in geometric data."""

    pass


class PathDataError(GeometryError):
    """Draw commands and coordinates of a shape do not match."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
