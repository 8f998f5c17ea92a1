import pytest
from src.lmc.linker import first_pass, SymbolTable
from src.lmc.diagnostics import AsmSemanticError, AsmSyntaxError

def test_labels_and_size():
    src = (
        "// cabecera\n"
        "START   INP\n"
        "        STA X\n"
        "\n"
        "LOOP    OUT    // comentario\n"
        "        BRA LOOP\n"
        "X       DAT\n"
    )
    r = first_pass(src)
    assert r.symtab["START"] == 0
    assert r.symtab["LOOP"] == 2
    assert r.symtab["X"] == 4
    assert r.size == 5
    assert list(r.symtab) == ["START", "LOOP", "X"]

def test_label_alone_binds_to_next_statement():
    src = "        LDA ONE\nAGAIN\n        OUT\nONE     DAT 1\n"
    r = first_pass(src)
    assert r.symtab["AGAIN"] == 1
    assert r.symtab["ONE"] == 2

def test_duplicate_label():
    src = "L       HLT\nL       HLT\n"
    with pytest.raises(AsmSemanticError) as ei:
        first_pass(src, filename="dup.lmc")
    assert ei.value.kind == "DuplicateLabel"
    assert ei.value.line == 2

def test_program_size_limit():
    ok = "        HLT\n" * 100
    assert first_pass(ok).size == 100
    with pytest.raises(AsmSemanticError) as ei:
        first_pass(ok + "        HLT\n")
    assert ei.value.kind == "ProgramTooLarge"
    assert ei.value.line == 101

def test_label_syntax_is_checked_in_first_pass():
    with pytest.raises(AsmSyntaxError) as ei:
        first_pass("        HLT\n1X      DAT\n")
    assert ei.value.kind == "LabelStartsWithDigit"
    assert ei.value.line == 2

def test_symbol_table_is_append_only():
    t = SymbolTable()
    t.define("A", 0)
    t.define("B", 5)
    with pytest.raises(AsmSemanticError):
        t.define("A", 9)
    assert t["A"] == 0
    assert t.get("C") is None
    assert "B" in t and len(t) == 2
    assert t.items() == [("A", 0), ("B", 5)]
