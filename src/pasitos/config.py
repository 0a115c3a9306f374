"""ContextVar-based parse configuration for Pasitos.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Every combinator reads the active config when it runs, so settings apply to
a whole parse without being threaded through each step.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from pasitos.config import set_parse_config, reset_parse_config, ParseConfig

    set_parse_config(ParseConfig(collect_alternatives=True))
    try:
        value = choose(stream, [number, identifier])
    finally:
        reset_parse_config()

    # Or use the context manager
    with parse_config_context(ParseConfig(max_repetitions=10_000)):
        items = many(stream, item)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        collect_alternatives: When ``choose`` fails, attach one note per
            failed candidate to the error it raises
        max_repetitions: Upper bound on items collected by a single
            ``many``/``many1`` call, the first ``many1`` match included;
            None means unbounded. Must not be negative.

    """

    collect_alternatives: bool = False
    max_repetitions: int | None = None

    def __post_init__(self) -> None:
        if self.max_repetitions is not None and self.max_repetitions < 0:
            raise ValueError(
                f"max_repetitions must be non-negative, got {self.max_repetitions}"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "collect_alternatives": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.collect_alternatives
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local).

    Returns:
        The active ParseConfig for this thread/context.

    """
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ParseConfig to use within the context.

    Yields:
        None

    Example:
        >>> with parse_config_context(ParseConfig(collect_alternatives=True)):
        ...     choose(stream, [keyword, identifier])
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
