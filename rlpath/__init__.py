from .core.completer import CompletionEngine
from .core.errors import ConfigError, FilesystemError, InputError, RlpathError, TerminalQueryError
from .core.layout import compute_max_per_row
from .core.resolver import Candidate, CandidateKind, CandidateSet, resolve
from .core.scanner import Scanner
from .core.tokenizer import locate_fragment_start

__version__ = "0.1.0"

__all__ = [
    "Candidate",
    "CandidateKind",
    "CandidateSet",
    "CompletionEngine",
    "ConfigError",
    "FilesystemError",
    "InputError",
    "RlpathError",
    "Scanner",
    "TerminalQueryError",
    "compute_max_per_row",
    "locate_fragment_start",
    "resolve",
]
