import pytest
from src.lmc.isa import lookup, OPCODES, OP_IO

def test_core_instructions_present():
    assert lookup("add").code == 1
    assert lookup("SUB").code == 2
    assert lookup("sta").code == 3
    assert lookup("Lda").code == 5
    assert lookup("bra").code == 6
    assert lookup("brz").code == 7
    assert lookup("brp").code == 8
    assert lookup("hlt").code == 0
    assert lookup("cob").code == 0

def test_arity_and_kinds():
    assert lookup("DAT").arity == "optional" and lookup("DAT").kind == "dat"
    assert lookup("INP").kind == "io" and lookup("INP").arity == "none"
    assert lookup("OUT").code == 2
    assert all(op.arity == "required" for name, op in OPCODES.items()
               if op.kind == "op" and op.code != 0)
    assert OP_IO == 9

def test_table_has_twelve_mnemonics():
    assert sorted(OPCODES) == sorted(
        ["DAT", "HLT", "COB", "ADD", "SUB", "STA", "LDA", "BRA", "BRZ", "BRP", "INP", "OUT"])

def test_unknown():
    with pytest.raises(KeyError):
        lookup("JMP")
