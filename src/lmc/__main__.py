from __future__ import annotations
import argparse

from . import assembler, vm

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="lmc", description="Little Man Computer: ensamblador y máquina virtual")
    sub = ap.add_subparsers(dest="command", required=True)

    p_asm = sub.add_parser("assemble", help="ensambla un fuente en un artefacto")
    assembler.add_arguments(p_asm)
    p_asm.set_defaults(func=assembler.run)

    p_run = sub.add_parser("run", help="ejecuta un artefacto")
    vm.add_arguments(p_run)
    p_run.set_defaults(func=vm.run)

    args = ap.parse_args(argv)
    return args.func(args)

if __name__ == "__main__":
    raise SystemExit(main())
