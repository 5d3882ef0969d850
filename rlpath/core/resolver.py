from __future__ import annotations

import glob
import os
import stat
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List

from .errors import FilesystemError
from .log import get_logger

log = get_logger(__name__)


class CandidateKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Candidate:
    name: str
    path: str
    kind: CandidateKind

    @property
    def is_dir(self) -> bool:
        return self.kind is CandidateKind.DIRECTORY


@dataclass
class CandidateSet:
    candidates: List[Candidate] = field(default_factory=list)

    @property
    def names(self) -> List[str]:
        return [c.name for c in self.candidates]

    @property
    def paths(self) -> List[str]:
        return [c.path for c in self.candidates]

    def add(self, candidate: Candidate) -> None:
        self.candidates.append(candidate)

    def __len__(self) -> int:
        return len(self.candidates)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self.candidates)


# ─── 路徑分隔符號：只在 resolve 的輸入/輸出兩端轉換 ───
def to_native(fragment: str, sep: str = os.sep) -> str:
    """Turn a fragment typed on the line into a glob-ready path."""
    if sep == "\\":
        return fragment.replace("/", "\\")
    # glob 不認得反斜線跳脫，"a\ b" 要比對到 "a b"
    return fragment.replace("\\ ", " ")


def from_native(path: str, sep: str = os.sep) -> str:
    if sep == "\\":
        return path.replace("\\", "/")
    return path


def resolve(fragment: str, root_dir: str = ".", only_dir: bool = False, sep: str = os.sep) -> CandidateSet:
    """Expand ``fragment + "*"`` inside ``root_dir``.

    Matches keep glob's enumeration order. Directories always come back with
    a trailing ``/``; files only when ``only_dir`` is false. A failed stat on
    any match aborts the whole resolution with :class:`FilesystemError`.
    """
    pattern = to_native(fragment, sep) + "*"
    root = root_dir or "."
    try:
        matches = glob.glob(pattern, root_dir=root, include_hidden=True)
    except (OSError, ValueError) as e:
        raise FilesystemError(f"glob failed for {pattern!r}: {e}") from e

    result = CandidateSet()
    for match in matches:
        try:
            st = os.stat(os.path.join(root, match))
        except OSError as e:
            raise FilesystemError(f"cannot stat {match!r}: {e}") from e
        path = from_native(match, sep)
        base = os.path.basename(match)
        if stat.S_ISDIR(st.st_mode):
            result.add(Candidate(base + "/", path + "/", CandidateKind.DIRECTORY))
        elif not only_dir:
            result.add(Candidate(base, path, CandidateKind.FILE))
    log.debug("resolved %r in %s → %d candidate(s)", fragment, root, len(result))
    return result
