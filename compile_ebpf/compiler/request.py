# compile_ebpf/compiler/request.py - Compilation request
"""
Immutable description of a single compilation.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


DEFAULT_INCLUDE_DIR = 'include'


@dataclass(frozen=True)
class CompileRequest:
    """Source file, destination object and header root for one compiler run."""
    source: Path
    dest: Path
    include_dir: Path

    @classmethod
    def from_args(cls, source, dest, include_dir: Optional[str] = None) -> 'CompileRequest':
        """
        Build a request from command-line values.

        A relative ``include_dir`` is resolved against the current directory.
        """
        include = Path(include_dir or DEFAULT_INCLUDE_DIR)
        if not include.is_absolute():
            include = Path.cwd() / include

        return cls(source=Path(source), dest=Path(dest), include_dir=include)
