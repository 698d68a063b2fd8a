"""Error-path tests.

Rendering a well-formed tree never raises; these tests cover the
exceptions raised for malformed input objects and invalid settings.
"""

import pytest

from wrapdoc import render
from wrapdoc.errors import (
    BuildError,
    ConfigError,
    DocumentError,
    RenderError,
    SerializationError,
    WrapdocError,
)
from wrapdoc.nodes import Group, IfWrap, Nodes, Text

# =========================================================================
# Exception hierarchy
# =========================================================================


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_type",
        [BuildError, ConfigError, DocumentError, RenderError, SerializationError],
    )
    def test_is_wrapdoc_error(self, exc_type: type[Exception]) -> None:
        assert issubclass(exc_type, WrapdocError)

    def test_serialization_error_is_value_error(self) -> None:
        assert issubclass(SerializationError, ValueError)


class TestConfigErrorFormatting:
    def test_message(self) -> None:
        err = ConfigError("max_width", "must not be negative, got -1")
        assert str(err) == "Invalid max_width: must not be negative, got -1"
        assert err.field == "max_width"


class TestDocumentErrorFields:
    def test_defaults(self) -> None:
        err = DocumentError("bad")
        assert str(err) == "bad"
        assert err.duplicate_ids == ()
        assert err.unknown_ids == ()
        assert err.early_ids == ()


# =========================================================================
# Graceful behavior on odd but well-formed input
# =========================================================================


class TestGracefulRendering:
    def test_empty_nodes(self) -> None:
        assert render(Nodes(()), 0) == ""

    def test_empty_group_at_zero_width(self) -> None:
        assert render(Group(0, ()), 0) == ""

    def test_dangling_if_wrap(self) -> None:
        assert render(IfWrap(123, Text("W"), Text("F")), 10) == "F"

    def test_deep_nesting(self) -> None:
        doc: Group = Group(0, (Text("x"),))
        for gid in range(1, 100):
            doc = Group(gid, (doc,))
        assert render(doc, 0) == "x"


class TestMalformedObjects:
    def test_plain_string_in_tree(self) -> None:
        with pytest.raises(RenderError, match="not a document node"):
            render(Group(0, ("raw",)), 80)  # type: ignore[arg-type]

    def test_none_root(self) -> None:
        with pytest.raises(RenderError):
            render(None, 80)  # type: ignore[arg-type]
