"""ContextVar-based format configuration for luaflow.

The output style is fixed; configuration only covers diagnostics.
Config is read by the lexer when it builds an error.

Usage:
    from luaflow.config import FormatConfig, format_config_context

    with format_config_context(FormatConfig(snippet_width=80)):
        reflow(source)

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable format configuration.

    Attributes:
        snippet_width: Maximum number of source characters quoted in a
            lexer error message.

    """

    snippet_width: int = 50

    def __post_init__(self) -> None:
        if self.snippet_width < 1:
            raise ValueError(f"snippet_width must be positive, got {self.snippet_width}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> FormatConfig:
        """Create FormatConfig from dictionary.

        Only includes keys that are valid FormatConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> FormatConfig.from_dict({"snippet_width": 20, "other": 1}).snippet_width
            20

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: FormatConfig = FormatConfig()

_format_config: ContextVar[FormatConfig] = ContextVar(
    "format_config",
    default=_DEFAULT_CONFIG,
)


def get_format_config() -> FormatConfig:
    """Get current format configuration (context-local)."""
    return _format_config.get()


def set_format_config(config: FormatConfig) -> None:
    """Set format configuration for current context."""
    _format_config.set(config)


def reset_format_config() -> None:
    """Reset to default configuration."""
    _format_config.set(_DEFAULT_CONFIG)


@contextmanager
def format_config_context(config: FormatConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.
    """
    previous = _format_config.get()
    _format_config.set(config)
    try:
        yield
    finally:
        _format_config.set(previous)


__all__ = [
    "FormatConfig",
    "format_config_context",
    "get_format_config",
    "reset_format_config",
    "set_format_config",
]
