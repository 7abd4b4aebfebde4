"""ContextVar-based scan configuration for Parenscan.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Document or Lexer captures the active config once, at construction.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from parenscan.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(validate_symbols=True)):
        doc = Document(data)
        ...

    # Or pass it explicitly
    doc = Document(data, config=ScanConfig(decode_text=True))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        validate_symbols: Reject atoms containing bytes outside printable
            ASCII (0x21-0x7E) with INVALID_SYMBOL_CHAR
        decode_text: Decode STR values to str, rejecting malformed UTF-8
            with INVALID_UTF8; otherwise values are memoryview slices
        strict_order: Raise CursorOrderError when a cursor is read while a
            nested cursor is still live, instead of draining the nested one

    """

    validate_symbols: bool = False
    decode_text: bool = False
    strict_order: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "validate_symbols": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.validate_symbols
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(decode_text=True)):
        ...     doc = Document(b"(a b)")
        >>> # Automatically reset to previous config

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
