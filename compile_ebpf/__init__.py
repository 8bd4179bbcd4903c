"""
compile-ebpf - compile eBPF C sources with clang and vendored libbpf headers.
"""

__version__ = "0.1.0"
