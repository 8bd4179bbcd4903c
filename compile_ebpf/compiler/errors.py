# compile_ebpf/compiler/errors.py - Compiler driver errors
"""
Exceptions raised while preparing headers or running the compiler.
"""

from typing import Sequence


class CompileEbpfError(Exception):
    """Base class for all compiler driver failures."""


class HeaderExtractionError(CompileEbpfError):
    """A vendored header could not be written to disk."""

    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"failed to extract header {path}: {reason}")


class CompilerLaunchError(CompileEbpfError):
    """The compiler process could not be started."""

    def __init__(self, clang: str, reason: str):
        self.clang = clang
        super().__init__(f"failed to execute {clang}: {reason}")


class CompilerFailureError(CompileEbpfError):
    """The compiler ran but exited with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, stdout: str, stderr: str):
        self.command = list(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            f"compilation failed with exit status {returncode}\n"
            f"stdout:\n{stdout}\n"
            f"stderr:\n{stderr}"
        )
