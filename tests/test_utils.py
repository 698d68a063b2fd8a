"""Tests for wrapdoc.utils."""

import logging

from wrapdoc.utils import get_logger


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        assert get_logger("mymodule").name == "wrapdoc.mymodule"

    def test_keeps_package_names(self) -> None:
        assert get_logger("wrapdoc").name == "wrapdoc"
        assert get_logger("wrapdoc.renderer").name == "wrapdoc.renderer"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)

    def test_wrapdocish_name_is_prefixed(self) -> None:
        assert get_logger("wrapdocs").name == "wrapdoc.wrapdocs"
