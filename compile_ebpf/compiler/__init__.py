# compile_ebpf/compiler/__init__.py - Compiler driver module
"""
Compiler driver for eBPF programs.

This module provides:
- request.py: Compilation request value type
- headers.py: Vendored header bundle and extraction
- driver.py: clang invocation
- errors.py: Error hierarchy
"""

from compile_ebpf.compiler.driver import CompilerDriver, compile_ebpf, resolve_clang
from compile_ebpf.compiler.errors import (
    CompileEbpfError,
    CompilerFailureError,
    CompilerLaunchError,
    HeaderExtractionError,
)
from compile_ebpf.compiler.headers import HeaderBundle, extract_headers
from compile_ebpf.compiler.request import CompileRequest

__all__ = [
    "CompileRequest",
    "CompilerDriver",
    "HeaderBundle",
    "compile_ebpf",
    "extract_headers",
    "resolve_clang",
    "CompileEbpfError",
    "HeaderExtractionError",
    "CompilerLaunchError",
    "CompilerFailureError",
]
