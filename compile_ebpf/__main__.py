from compile_ebpf.cli import main

main()
