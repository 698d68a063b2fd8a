"""Exception classes for wrapdoc.

Rendering a well-formed document never raises. These exceptions cover
malformed input objects, invalid configuration, and producer-side checks.
"""

from __future__ import annotations


class WrapdocError(Exception):
    """Base exception for all wrapdoc errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(WrapdocError):
    """Error during rendering or measurement.

    Raised when the renderer encounters an object that is not one of the
    document node variants.
    """

    pass


class ConfigError(WrapdocError):
    """Invalid render configuration.

    Raised for a negative or non-integer column budget, or an indent unit
    that is not a string.
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending setting (e.g., "max_width")
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Invalid {field}: {message}")


class BuildError(WrapdocError):
    """Error in document construction.

    Raised by DocumentBuilder when asked to reference a group it never
    allocated.
    """

    pass


class DocumentError(WrapdocError):
    """Document tree is not well-formed.

    Raised by ``check_well_formed``. The renderer itself never checks.
    """

    def __init__(
        self,
        message: str,
        duplicate_ids: tuple[int, ...] = (),
        unknown_ids: tuple[int, ...] = (),
        early_ids: tuple[int, ...] = (),
    ) -> None:
        """Initialize document error.

        Args:
            message: Summary of the problems found
            duplicate_ids: Group ids used by more than one Group
            unknown_ids: IfWrap ids with no matching Group in the tree
            early_ids: IfWrap ids reached before their Group was decided
        """
        self.duplicate_ids = duplicate_ids
        self.unknown_ids = unknown_ids
        self.early_ids = early_ids
        super().__init__(message)


class SerializationError(WrapdocError, ValueError):
    """Error converting a document to or from JSON.

    Subclasses ValueError for malformed payloads.
    """

    pass
