# tests/conftest.py - Shared fixtures
import logging

import pytest


MINIMAL_PROGRAM = """\
typedef unsigned short __u16;
typedef unsigned int __u32;
typedef unsigned long long __u64;

#include <bpf/bpf_helpers.h>
#include <bpf/bpf_endian.h>
#include <bpf/bpf_tracing.h>

SEC("xdp")
int xdp_pass(void *ctx)
{
	return 2;
}

char LICENSE[] SEC("license") = "GPL";
"""


@pytest.fixture(autouse=True)
def reset_root_logger():
    """setup_logging replaces root handlers; restore them after each test"""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def minimal_source(tmp_path):
    path = tmp_path / "prog.bpf.c"
    path.write_text(MINIMAL_PROGRAM)
    return path
