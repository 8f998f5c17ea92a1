"""
LMC CPU: register set, opcode enumeration and instruction decoding.

Register model:
  a           accumulator, 0..max_value (no sign bit)
  pc          program counter (next mailbox to fetch)
  neg         flag set by ADD/SUB when the last result wrapped
  halted      loop stops when set
  error       halted because of a bad instruction or exhausted input

The last fetched word and its decoded fields are kept too, for the
diagnostic dump.
"""

from enum import Enum, IntEnum
from typing import Tuple

from .config import Arch, DEFAULT_ARCH
from .utils import split_word


class Opcode(IntEnum):
    HLT = 0
    ADD = 1
    SUB = 2
    STA = 3
    # no 4xx instruction
    LDA = 5
    BRA = 6
    BRZ = 7
    BRP = 8
    IO = 9


class IoSelector(IntEnum):
    INPUT = 1
    OUTPUT = 2


class StopReason(Enum):
    HALT = 'HALT'
    ERROR = 'ERROR'
    TIMEOUT = 'TIMEOUT'


class Registers:
    """LMC register set."""

    __slots__ = ('a', 'pc', 'instruction', 'opcode', 'addr', 'neg', 'halted', 'error')

    def __init__(self):
        self.a: int = 0
        self.pc: int = 0
        self.instruction: int = 0
        self.opcode: int = 0
        self.addr: int = 0
        self.neg: bool = False
        self.halted: bool = False
        self.error: bool = False

    @property
    def running(self) -> bool:
        return not self.halted

    def dump(self) -> str:
        return "\n".join([
            f"a  = {self.a}",
            f"pc = {self.pc}",
            f"opcode = {self.opcode}",
            f"addr   = {self.addr}",
            f"neg    = {int(self.neg)}",
            f"halt   = {int(self.halted)}",
        ])

    def __repr__(self):
        return (f"Registers(a={self.a}, pc={self.pc}, neg={self.neg}, "
                f"halted={self.halted}, error={self.error})")


def decode(word: int, arch: Arch = DEFAULT_ARCH) -> Tuple[int, int]:
    """Split a word into (opcode digit, address field)."""
    return split_word(word, arch.mailboxes)
