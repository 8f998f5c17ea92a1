import os
import pytest
from src.lmc.writers import to_artifact, write_artifact
from src.lmc.encoding import Encoded
from src.lmc.config import Arch

def _words(*values):
    return [Encoded(word=v, addr=i, line=i + 1, mnemonic="DAT") for i, v in enumerate(values)]

def test_to_artifact_fixed_width():
    assert to_artifact(_words(901, 5, 0, 999)) == "901005000999"
    assert to_artifact([]) == ""
    assert to_artifact(_words(7), arch=Arch(num_digits=4)) == "0007"

def test_write_artifact(tmp_path):
    p = tmp_path / "out.bin"
    write_artifact(_words(512, 902), str(p))
    assert p.read_bytes() == b"512902"
    assert os.listdir(tmp_path) == ["out.bin"]

def test_write_artifact_keeps_unrelated_tmp_file(tmp_path):
    p = tmp_path / "out.bin"
    other = tmp_path / "out.bin.tmp"
    other.write_text("no tocar")
    write_artifact(_words(1), str(p))
    assert other.read_text() == "no tocar"
    assert sorted(os.listdir(tmp_path)) == ["out.bin", "out.bin.tmp"]

def test_write_artifact_replaces_existing(tmp_path):
    p = tmp_path / "out.bin"
    p.write_text("999999999")
    write_artifact(_words(7), str(p))
    assert p.read_text() == "007"

def test_write_artifact_failure_leaves_nothing(tmp_path):
    p = tmp_path / "missing_dir" / "out.bin"
    with pytest.raises(OSError):
        write_artifact(_words(1), str(p))
    assert not p.exists()
    assert os.listdir(tmp_path) == []

def test_write_artifact_relative_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write_artifact(_words(5), "rel.bin")
    assert (tmp_path / "rel.bin").read_text() == "005"
    assert os.listdir(tmp_path) == ["rel.bin"]
