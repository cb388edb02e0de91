"""Exception hierarchy for svgdxf."""


class SvgDxfError(Exception):
    """Base exception for all svgdxf errors."""

    pass


class PathSyntaxError(SvgDxfError):
    """The path tokenizer rejected a path-data string."""

    def __init__(self, path_data: str, reason: str) -> None:
        self.path_data = path_data
        self.reason = reason
        preview = path_data if len(path_data) <= 40 else path_data[:37] + "..."
        super().__init__(f"Invalid path data '{preview}': {reason}")


class EmptyInputError(SvgDxfError):
    """Markup produced no polylines while entities were required."""

    def __init__(self, path_count: int) -> None:
        self.path_count = path_count
        super().__init__(f"No convertible geometry found ({path_count} paths extracted)")


class ConversionError(SvgDxfError):
    """A source file could not be read or converted."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to convert '{source}': {reason}")
