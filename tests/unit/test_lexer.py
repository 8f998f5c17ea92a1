import pytest
from src.lmc.lexer import Scanner, MAX_LABEL_LEN
from src.lmc.diagnostics import AsmSyntaxError, AsmSemanticError

# --- read_label ---
@pytest.mark.parametrize("src, name, rest", [
    ("LOOP LDA X", "LOOP", " LDA X"),
    ("_start\n", "_start", "\n"),
    ("a1_b2// c", "a1_b2", "// c"),
    ("x" * MAX_LABEL_LEN + " HLT", "x" * MAX_LABEL_LEN, " HLT"),
])
def test_read_label(src, name, rest):
    sc = Scanner(src)
    assert sc.read_label() == name
    assert sc.text[sc.pos:] == rest

@pytest.mark.parametrize("src, kind", [
    ("1abc", "LabelStartsWithDigit"),
    ("x" * (MAX_LABEL_LEN + 1), "LabelTooLong"),
    (":foo", "InvalidLabel"),
])
def test_read_label_errors(src, kind):
    with pytest.raises(AsmSyntaxError) as ei:
        Scanner(src).read_label()
    assert ei.value.kind == kind

# --- read_operand ---
@pytest.mark.parametrize("src, expected", [
    ("12", 12),
    ("007 // comentario", 7),
    ("FOO", 40),
    ("FOO\n", 40),
])
def test_read_operand(src, expected):
    assert Scanner(src).read_operand({"FOO": 40}) == expected

@pytest.mark.parametrize("src, kind", [
    ("12x", "AmbiguousOperand"),
    ("3_", "AmbiguousOperand"),
    ("", "MissingOperand"),
    ("\n", "MissingOperand"),
    ("-1", "MissingOperand"),
])
def test_read_operand_syntax_errors(src, kind):
    with pytest.raises(AsmSyntaxError) as ei:
        Scanner(src).read_operand({})
    assert ei.value.kind == kind

def test_read_operand_undefined_label():
    sc = Scanner("\n\nBAR", filename="p.lmc")
    sc.advance(); sc.advance()
    with pytest.raises(AsmSemanticError) as ei:
        sc.read_operand({"FOO": 1})
    assert ei.value.kind == "UndefinedLabel"
    assert ei.value.line == 3
    assert "BAR" in str(ei.value)

# --- skip_to_end_of_line ---
@pytest.mark.parametrize("src", [
    "\nX",
    "   \t\nX",
    "  // cualquier cosa ; HLT\nX",
    "//\nX",
])
def test_skip_to_end_of_line(src):
    sc = Scanner(src)
    sc.skip_to_end_of_line()
    assert sc.peek() == "X"
    assert sc.line == 2

@pytest.mark.parametrize("src, allow, kind", [
    ("  x\n", True, "ExpectedEndOfLine"),
    ("  / x\n", True, "UnexpectedSlash"),
    ("  // c\n", False, "ExpectedEndOfLine"),
])
def test_skip_to_end_of_line_errors(src, allow, kind):
    with pytest.raises(AsmSyntaxError) as ei:
        Scanner(src).skip_to_end_of_line(allow_comment=allow)
    assert ei.value.kind == kind
    assert ei.value.line == 1

def test_skip_to_end_of_line_at_eof():
    sc = Scanner("   ")
    sc.skip_to_end_of_line()
    assert sc.at_eof()

# --- begin_line ---
@pytest.mark.parametrize("src, label, has_stmt, nxt", [
    ("LOOP LDA X\n", "LOOP", True, "L"),
    ("   HLT\n", None, True, "H"),
    ("\tout\n", None, True, "o"),
    ("END\n", "END", False, ""),
    ("END   // fin\n", "END", False, ""),
    ("   // comentario\n", None, False, ""),
    ("// comentario\n", None, False, ""),
    ("\n", None, False, ""),
    ("     \n", None, False, ""),
])
def test_begin_line(src, label, has_stmt, nxt):
    sc = Scanner(src)
    assert sc.begin_line() == (label, has_stmt)
    assert sc.peek() == nxt

@pytest.mark.parametrize("src, kind", [
    ("LOOP: LDA X\n", "InvalidLabel"),
    ("9LIVES HLT\n", "LabelStartsWithDigit"),
    ("/ nope\n", "UnexpectedSlash"),
])
def test_begin_line_errors(src, kind):
    with pytest.raises(AsmSyntaxError) as ei:
        Scanner(src).begin_line()
    assert ei.value.kind == kind

def test_line_and_column_tracking():
    sc = Scanner("a\nbc\n  d")
    sc.skip_line(); sc.skip_line()
    sc.skip_blanks()
    assert sc.line == 3
    assert sc.col == 3
    assert sc.peek() == "d"
