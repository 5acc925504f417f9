class Bbox2dError(Exception):
    """Base class for all errors raised by this package."""


class ParserError(Bbox2dError):
    """Base class for input parsing errors."""


class MalformedPointsError(ParserError):
    """
    Error class representing point data that is not a list of (x, y) rows.
    """

    def __init__(self, source: str, reason: str) -> None:
        """
        Construct a new malformed points parser error.

        Parameter
        ---------
        source: str
            A description of the point data source (e.g. a file name).

        reason: str
            Why the data could not be read.
        """

        super().__init__(f'Malformed points in {source}: {reason}')

        self.source = source
        """The point data source."""
