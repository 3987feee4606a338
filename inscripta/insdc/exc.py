from typing import Optional


class InsdcException(Exception):
    """
    Base exception class for INSDC location handling.
    """

    pass


class LocationException(InsdcException):
    """
    Raised when a Location or Point constructor is given invalid inputs, such as a negative position
    or a compound location with fewer than two members.
    """

    pass


class InsdcParserError(InsdcException):
    """
    Base class for all failures to parse a location expression. The offending text (or as much of it as
    was read before the failure) is available as ``text``.
    """

    def __init__(self, message: str, text: Optional[str] = None):
        super().__init__(message)
        self.text = text


class MalformedLeafError(InsdcParserError):
    """
    Raised when a delimiter-free segment such as ``1#4`` matches neither the single position grammar
    nor the range grammar.
    """

    pass


class StructuralMismatchError(InsdcParserError):
    """
    Raised when parentheses are unbalanced, a group has no keyword in front of it, or a group is empty.
    """

    pass


class NestingDepthError(StructuralMismatchError):
    """
    Raised when groups are nested deeper than the parser's configured ``max_depth``.
    """

    pass


class CardinalityError(InsdcParserError):
    """
    Raised when a top level expression produces zero locations, or more than one location without an
    enclosing keyword such as ``join``.
    """

    pass


class UnknownJoinTypeError(InsdcParserError):
    """
    Raised by the default composite builder when the keyword in front of a group is not a known join type.
    """

    pass


class LocationStreamError(InsdcParserError):
    """
    Raised when the underlying character stream fails during a read. The original error is chained.
    """

    pass


class MixedStrandWarning(UserWarning):
    pass
