"""
LMC virtual machine: fetch/decode/execute loop and CLI.

Execution model:
  1. Fetch the word at pc, then pc += 1 (no wrap-around)
  2. Decode opcode = word // mailboxes, addr = word % mailboxes
  3. Dispatch through the Opcode -> handler table
  4. Repeat until halted

Termination reasons:
  - HALT:     HLT/COB executed, fell into a zero word, or ran past the
              last mailbox (read as a zero word)
  - ERROR:    undefined opcode, bad I/O selector, console input exhausted
  - TIMEOUT:  max_steps reached (only when a budget is given)
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import Callable, Dict, Iterable, Optional

from .config import Arch, DEFAULT_ARCH, configure_logging
from .cpu import Registers, Opcode, IoSelector, StopReason, decode
from .memory import Memory, load_artifact
from .console import Console
from .utils import in_range
from .diagnostics import LoadError

logger = logging.getLogger(__name__)


class Machine:
    """One LMC instance: registers, mailboxes and console, owned together.

    Usage:
        m = Machine(console=Console(io.StringIO("5\\n"), out))
        m.load(words)
        reason = m.run()
    """

    def __init__(self, arch: Arch = DEFAULT_ARCH, console: Optional[Console] = None):
        self.arch = arch
        self.regs = Registers()
        self.mem = Memory(arch)
        self.console = console if console is not None else Console()
        self.fault: Optional[str] = None
        self.bad_instruction = False
        self.steps = 0
        self._dispatch = self._build_dispatch()

    def _build_dispatch(self) -> Dict[Opcode, Callable[[], None]]:
        return {
            Opcode.HLT: self._halt,
            Opcode.ADD: self._add,
            Opcode.SUB: self._sub,
            Opcode.STA: self._store,
            Opcode.LDA: self._load,
            Opcode.BRA: self._branch,
            Opcode.BRZ: self._branch_zero,
            Opcode.BRP: self._branch_positive,
            Opcode.IO: self._io,
        }

    # --- Loading ---

    def reset(self) -> None:
        self.regs = Registers()
        self.fault = None
        self.bad_instruction = False
        self.steps = 0

    def load(self, words: Iterable[int]) -> int:
        """Load words from mailbox 0 and reset the registers."""
        self.reset()
        return self.mem.load(words)

    def load_file(self, path: str) -> int:
        return self.load(load_artifact(path, arch=self.arch))

    # --- Execution ---

    def step(self) -> None:
        """Execute a single instruction."""
        regs = self.regs
        if regs.halted:
            return

        # past the last mailbox the fetch reads a zero word (HLT)
        if in_range(regs.pc, self.arch.max_addr):
            regs.instruction = self.mem.read(regs.pc)
        else:
            regs.instruction = 0
        regs.pc += 1
        regs.opcode, regs.addr = decode(regs.instruction, self.arch)
        self.steps += 1

        try:
            op = Opcode(regs.opcode)
        except ValueError:
            self._fault("opcode no definido")
            return

        logger.debug("%02d: %0*d %s %02d  a=%d neg=%d", regs.pc - 1, self.arch.num_digits,
                     regs.instruction, op.name, regs.addr, regs.a, int(regs.neg))
        self._dispatch[op]()

    def run(self, max_steps: Optional[int] = None) -> StopReason:
        """Run until halted. Without max_steps there is no instruction budget."""
        start = self.steps
        while self.regs.running:
            if max_steps is not None and self.steps - start >= max_steps:
                return StopReason.TIMEOUT
            self.step()
        return StopReason.ERROR if self.regs.error else StopReason.HALT

    def dump(self) -> str:
        if self.bad_instruction:
            head = f"Instrucción inválida! ({self.regs.instruction})"
        else:
            head = "Parada por error"
        if self.fault:
            head += f": {self.fault}"
        return head + "\n" + self.regs.dump()

    def _fault(self, reason: str, *, bad_instruction: bool = True) -> None:
        self.fault = reason
        self.bad_instruction = bad_instruction
        self.regs.halted = True
        self.regs.error = True
        logger.debug("Parada por error: %s", reason)

    # --- Instruction handlers ---

    def _halt(self) -> None:
        self.regs.halted = True

    def _add(self) -> None:
        regs = self.regs
        regs.a += self.mem.read(regs.addr)
        regs.neg = regs.a > self.arch.max_value
        if regs.neg:
            regs.a -= self.arch.max_value + 1

    def _sub(self) -> None:
        regs = self.regs
        regs.a -= self.mem.read(regs.addr)
        regs.neg = regs.a < 0
        if regs.neg:
            regs.a += self.arch.max_value + 1

    def _store(self) -> None:
        self.mem.write(self.regs.addr, self.regs.a)

    def _load(self) -> None:
        self.regs.a = self.mem.read(self.regs.addr)

    def _branch(self) -> None:
        self.regs.pc = self.regs.addr

    def _branch_zero(self) -> None:
        if self.regs.a == 0:
            self.regs.pc = self.regs.addr

    def _branch_positive(self) -> None:
        if not self.regs.neg:
            self.regs.pc = self.regs.addr

    def _io(self) -> None:
        try:
            selector = IoSelector(self.regs.addr)
        except ValueError:
            self._fault("selector de E/S inválido")
            return

        if selector is IoSelector.INPUT:
            try:
                self.regs.a = self.console.read_value(self.arch.max_value)
            except EOFError:
                self._fault("entrada agotada", bad_instruction=False)
        else:
            self.console.write_value(self.regs.a)


def run_file(path: str, *, console: Optional[Console] = None,
             arch: Arch = DEFAULT_ARCH) -> Machine:
    """Load an artifact and run it to completion. Raises LoadError."""
    m = Machine(arch=arch, console=console)
    m.load_file(path)
    m.run()
    return m


def add_arguments(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("artifact", help="artefacto generado por lmasm")
    ap.add_argument("--digits", type=int, default=DEFAULT_ARCH.num_digits,
                    help="dígitos por palabra (3 → 100 buzones)")
    ap.add_argument("-v", "--verbose", action="store_true", help="traza cada instrucción")


def run(args: argparse.Namespace) -> int:
    configure_logging(args.verbose)
    try:
        arch = Arch(num_digits=args.digits)
    except ValueError as ex:
        print(f"ERROR: {ex}", file=sys.stderr)
        return 1

    console = Console(prompt=sys.stdin.isatty())
    try:
        m = run_file(args.artifact, console=console, arch=arch)
    except LoadError as ex:
        print(f"ERROR: {ex}", file=sys.stderr)
        return 1

    if m.regs.error:
        print(m.dump(), file=sys.stderr)
        return 1
    return 0


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="lmc", description="Máquina virtual Little Man Computer")
    add_arguments(ap)
    return run(ap.parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(main())
