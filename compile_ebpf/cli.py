# compile_ebpf/cli.py - Command-line interface
"""
Command-line interface for the eBPF compiler driver.
"""

import click
import logging
import yaml

from compile_ebpf.compiler import CompileEbpfError, CompileRequest, CompilerDriver
from compile_ebpf.utils.config import Config
from compile_ebpf.utils.logger import setup_logging


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.argument('source', type=click.Path(dir_okay=False))
@click.argument('dest', type=click.Path(dir_okay=False))
@click.option('--include-dir', type=click.Path(file_okay=False), help='Directory to extract headers into (default: ./include)')
@click.option('--config', type=click.Path(), help='Configuration file')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']), help='Logging level')
@click.option('--log-file', type=click.Path(), help='Log file path')
def cli(source, dest, include_dir, config, log_level, log_file):
    """
    Compile an eBPF C SOURCE into the object file DEST.

    Vendored libbpf headers are written to INCLUDE_DIR/bpf before clang is
    run. Set CLANG to use a compiler other than /usr/bin/clang.

    Example:
        compile-ebpf probe.bpf.c probe.o
        CLANG=/usr/lib/llvm-14/bin/clang compile-ebpf probe.bpf.c probe.o
    """
    try:
        cfg = Config(config)
    except (yaml.YAMLError, ValueError, OSError) as e:
        raise click.ClickException(f"invalid config file {config}: {e}") from e

    try:
        setup_logging(level=log_level or cfg.get('logging.level', 'WARNING'), log_file=log_file)
    except OSError as e:
        raise click.ClickException(f"cannot open log file {log_file}: {e}") from e

    logger = logging.getLogger(__name__)

    request = CompileRequest.from_args(source, dest, include_dir or cfg.get('paths.include_dir'))

    try:
        CompilerDriver(config=cfg).compile(request)
    except CompileEbpfError as e:
        logger.debug(f"Compilation of {source} aborted: {type(e).__name__}")
        raise click.ClickException(str(e)) from e


def main():
    cli(prog_name='compile-ebpf')


if __name__ == '__main__':
    main()
