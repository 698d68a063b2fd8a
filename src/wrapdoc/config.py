"""ContextVar-based render configuration for wrapdoc.

Provides context-local defaults for the column budget and indentation
unit. ``render()`` reads them when called without explicit arguments.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from wrapdoc import render
    from wrapdoc.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(max_width=40, indent="    ")):
        text = render(doc)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from wrapdoc.errors import ConfigError

DEFAULT_MAX_WIDTH = 80
DEFAULT_INDENT = "  "


def validate_max_width(max_width: object) -> int:
    """Check a column budget, returning it unchanged.

    Zero is allowed and forces every group to wrap.

    Raises:
        ConfigError: If the value is not a non-negative integer
    """
    if isinstance(max_width, bool) or not isinstance(max_width, int):
        raise ConfigError("max_width", f"expected an integer, got {type(max_width).__name__}")
    if max_width < 0:
        raise ConfigError("max_width", f"must not be negative, got {max_width}")
    return max_width


def validate_indent(indent: object) -> str:
    """Check an indentation unit, returning it unchanged.

    Raises:
        ConfigError: If the value is not a string
    """
    if not isinstance(indent, str):
        raise ConfigError("indent", f"expected a string, got {type(indent).__name__}")
    return indent


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        max_width: Column budget; groups wider than the remaining space wrap
        indent: Indentation unit repeated once per depth level

    """

    max_width: int = DEFAULT_MAX_WIDTH
    indent: str = DEFAULT_INDENT

    def __post_init__(self) -> None:
        validate_max_width(self.max_width)
        validate_indent(self.indent)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> RenderConfig.from_dict({"max_width": 40, "colour": "red"}).max_width
            40

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (context-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(max_width=20)):
        ...     get_render_config().max_width
        20

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "DEFAULT_INDENT",
    "DEFAULT_MAX_WIDTH",
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
    "validate_indent",
    "validate_max_width",
]
