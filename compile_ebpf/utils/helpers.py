# compile_ebpf/utils/helpers.py - Helper functions
"""
Host inspection helpers used by the compiler driver.
"""

import platform
import shutil
from typing import Optional
import logging


logger = logging.getLogger(__name__)

# Host machine names whose __TARGET_ARCH_ macro differs from the machine name
ARCH_REMAP = {
    'x86_64': 'x86',
    'aarch64': 'arm64',
}


def host_machine() -> str:
    """
    Get the host processor architecture as reported by uname.

    Returns:
        Machine name (e.g., "x86_64")
    """
    return platform.machine()


def resolve_target_arch(machine: Optional[str] = None) -> str:
    """
    Map a host architecture to the value used in ``-D__TARGET_ARCH_<arch>``.

    Args:
        machine: Architecture string, defaults to the current host

    Returns:
        Architecture name understood by bpf_tracing.h
    """
    if machine is None:
        machine = host_machine()

    return ARCH_REMAP.get(machine, machine)


def find_clang() -> Optional[str]:
    """
    Look for a clang executable on PATH.

    Returns:
        Absolute path to clang or None if not installed
    """
    return shutil.which('clang')
