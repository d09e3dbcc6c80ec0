"""Exceptions raised by the graphic core."""


class GraphicError(Exception):
    """Base class for graphic errors."""
    pass


class FormatError(GraphicError):
    """Raised when a .grphc file does not follow the line format."""

    def __init__(self, line: int, reason: str, source: str | None = None):
        self.line = line
        self.reason = reason
        self.source = source
        where = f"{source}:{line}" if source else f"line {line}"
        super().__init__(f"{where}: {reason}")


class UnknownFormatError(GraphicError, ValueError):
    """Raised when no renderer is registered for a requested format."""

    def __init__(self, format_name: str, available: list[str]):
        self.format_name = format_name
        self.available = available
        super().__init__(f"Unknown format '{format_name}'. Available: {available}")
