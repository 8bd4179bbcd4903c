# compile_ebpf/compiler/headers.py - Vendored libbpf headers
"""
Vendored BPF headers and their extraction to an include directory.

The header text ships as package data under ``compile_ebpf/headers/bpf``
and is written to ``<include_dir>/bpf/<name>`` before every compilation so
that clang finds them through ``-I<include_dir>``.
"""

from importlib import resources
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple
import logging

from compile_ebpf.compiler.errors import HeaderExtractionError


logger = logging.getLogger(__name__)

HEADER_NAMES = (
    'bpf_helpers.h',
    'bpf_helper_defs.h',
    'bpf_tracing.h',
    'bpf_core_read.h',
    'bpf_endian.h',
)


class HeaderBundle:
    """
    Fixed mapping of header filename to header text.
    """

    def __init__(self, headers: Dict[str, str]):
        self.headers = dict(headers)

    @classmethod
    def vendored(cls) -> 'HeaderBundle':
        """Load the headers shipped with this package."""
        root = resources.files('compile_ebpf').joinpath('headers').joinpath('bpf')
        return cls({name: root.joinpath(name).read_text(encoding='utf-8') for name in HEADER_NAMES})

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(self.headers.items())

    def __len__(self):
        return len(self.headers)

    def __contains__(self, name):
        return name in self.headers

    def __getitem__(self, name):
        return self.headers[name]


def extract_headers(include_dir, bundle: Optional[HeaderBundle] = None) -> List[Path]:
    """
    Write every header of ``bundle`` to ``include_dir/bpf``.

    Existing files are overwritten. Files written before a failure are left
    in place.

    Args:
        include_dir: Include root passed to the compiler with ``-I``
        bundle: Headers to write, defaults to the vendored set

    Returns:
        Paths of the written headers

    Raises:
        HeaderExtractionError: if the directory or a file cannot be written
    """
    if bundle is None:
        bundle = HeaderBundle.vendored()

    bpf_dir = Path(include_dir) / 'bpf'
    try:
        bpf_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise HeaderExtractionError(bpf_dir, str(e)) from e

    written = []
    for name, content in bundle.items():
        path = bpf_dir / name
        try:
            with open(path, 'w', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            raise HeaderExtractionError(path, str(e)) from e

        written.append(path)

    logger.debug(f"Extracted {len(written)} headers to {bpf_dir}")
    return written
