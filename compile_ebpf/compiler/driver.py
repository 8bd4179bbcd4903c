# compile_ebpf/compiler/driver.py - clang driver for eBPF objects
"""
Compiles eBPF C sources into BPF object files.

Headers are extracted first, then clang is run once with a fixed flag set:

    clang -I<include> -g -O2 -target bpf -c -D__TARGET_ARCH_<arch> <src> -o <dst>
"""

import subprocess
from typing import List, Mapping, Optional
import logging

from compile_ebpf.compiler.errors import CompilerFailureError, CompilerLaunchError
from compile_ebpf.compiler.headers import HeaderBundle, extract_headers
from compile_ebpf.compiler.request import CompileRequest
from compile_ebpf.utils.config import Config
from compile_ebpf.utils.helpers import resolve_target_arch


def resolve_clang(explicit: Optional[str] = None,
                  environ: Optional[Mapping[str, str]] = None,
                  config: Optional[Config] = None) -> str:
    """
    Resolve the compiler executable path.

    Order: explicit value, ``CLANG`` environment variable, configured path,
    then ``/usr/bin/clang``.
    """
    if explicit:
        return explicit

    if config is None:
        config = Config()

    return config.clang_path(environ)


class CompilerDriver:
    """
    Runs clang to turn an eBPF C source into an object file.
    """

    def __init__(self, clang: Optional[str] = None, arch: Optional[str] = None,
                 config: Optional[Config] = None, bundle: Optional[HeaderBundle] = None):
        """
        Initialize the driver.

        Args:
            clang: Compiler executable, resolved from the environment if omitted
            arch: Host machine name, defaults to the running host
            config: Configuration supplying the default compiler path
            bundle: Headers to extract, defaults to the vendored set
        """
        self.config = config or Config()
        self.clang = resolve_clang(clang, config=self.config)
        self.target_arch = resolve_target_arch(arch)
        self.bundle = bundle

        self.logger = logging.getLogger(__name__)

    def build_command(self, request: CompileRequest) -> List[str]:
        """
        Build the compiler argument list for ``request``.

        Returns:
            argv with the compiler path first
        """
        return [
            self.clang,
            f"-I{request.include_dir}",
            '-g',
            '-O2',
            '-target', 'bpf',
            '-c',
            f"-D__TARGET_ARCH_{self.target_arch}",
            str(request.source),
            '-o', str(request.dest),
        ]

    def compile(self, request: CompileRequest):
        """
        Extract headers and compile ``request.source`` into ``request.dest``.

        Raises:
            HeaderExtractionError: headers could not be written
            CompilerLaunchError: the compiler could not be started
            CompilerFailureError: the compiler exited with a non-zero status
        """
        extract_headers(request.include_dir, self.bundle)

        command = self.build_command(request)
        self.logger.debug(f"Running: {' '.join(command)}")

        try:
            result = subprocess.run(command, capture_output=True)
        except OSError as e:
            raise CompilerLaunchError(self.clang, str(e)) from e

        if result.returncode != 0:
            stdout = result.stdout.decode('utf-8', errors='replace')
            stderr = result.stderr.decode('utf-8', errors='replace')
            self.logger.error(f"{self.clang} exited with status {result.returncode} for {request.source}")
            raise CompilerFailureError(command, result.returncode, stdout, stderr)

        self.logger.info(f"Compiled {request.source} -> {request.dest}")


def compile_ebpf(source, dest, include_dir, clang: Optional[str] = None, arch: Optional[str] = None):
    """
    Compile ``source`` to ``dest`` using headers extracted under ``include_dir``.

    Args:
        source: eBPF C source file
        dest: Output object file
        include_dir: Include root for the vendored headers
        clang: Compiler override, otherwise ``$CLANG`` or ``/usr/bin/clang``
        arch: Host machine name override
    """
    request = CompileRequest.from_args(source, dest, include_dir)
    CompilerDriver(clang=clang, arch=arch).compile(request)
