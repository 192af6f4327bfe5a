"""
Exception hierarchy for the Lumania plugin utilities.

Storage failures are normally logged rather than raised; these types are raised
only where the caller has to decide what to do (strict store loading and
identifier resolution when materializing items).
"""

__all__ = [
    "LumaniaError",
    "StoreLoadError",
    "DocumentFormatError",
    "UnknownIdentifierError",
]


class LumaniaError(Exception):
    """Root exception for all Lumania utility errors."""


class StoreLoadError(LumaniaError):
    """Raised when a backing config file cannot be read or parsed."""


class DocumentFormatError(StoreLoadError):
    """Raised when a YAML document parses but its top level is not a mapping."""


class UnknownIdentifierError(LumaniaError, ValueError):
    """
    Raised when a stored identifier does not name a member of its enum.

    Attributes:
        kind: Name of the identifier family, e.g. 'Material' or 'ItemFlag'
        value: The stored value that failed to resolve (None if missing)
    """

    def __init__(self, kind: str, value):
        self.kind = kind
        self.value = value
        super().__init__(f"Unknown {kind} identifier: {value!r}")
