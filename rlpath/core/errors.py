from __future__ import annotations


class RlpathError(Exception):
    """Base class for every failure raised by rlpath."""


class ConfigError(RlpathError):
    """Root directory could not be resolved (unknown home, not a directory)."""


class FilesystemError(RlpathError):
    """Glob or stat lookup failed while resolving candidates."""


class TerminalQueryError(RlpathError):
    """Terminal width could not be determined."""


class InputError(RlpathError):
    """The line read ended without a line (EOF, Ctrl+C)."""
