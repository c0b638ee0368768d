import os, stat
import pytest
from mfpatch.core.errors import DescriptorReadError, DescriptorWriteError
from mfpatch.data.repository import FileDescriptorStore, MemoryDescriptorStore

def test_read_keeps_terminators(tmp_path):
    p = tmp_path / "Makefile"
    p.write_bytes(b"A = 1\r\nB = 2\nC = 3")
    assert FileDescriptorStore().read_lines(str(p)) == ["A = 1\r\n", "B = 2\n", "C = 3"]

def test_roundtrip_is_byte_identical(tmp_path):
    raw = b"OBJS = caf\xe9.o\r\nHDRS = x.h\n\n"
    p = tmp_path / "Makefile"
    p.write_bytes(raw)
    store = FileDescriptorStore()
    store.write_lines(str(p), store.read_lines(str(p)))
    assert p.read_bytes() == raw

def test_read_missing_file(tmp_path):
    with pytest.raises(DescriptorReadError) as ei:
        FileDescriptorStore().read_lines(str(tmp_path / "Makefile"))
    assert "read failed" in str(ei.value)
    assert isinstance(ei.value.__cause__, FileNotFoundError)

def test_write_replaces_and_keeps_mode(tmp_path):
    p = tmp_path / "Makefile"
    p.write_text("old\n", encoding="utf-8")
    os.chmod(p, 0o640)
    FileDescriptorStore().write_lines(str(p), ["new\n"])
    assert p.read_text(encoding="utf-8") == "new\n"
    assert stat.S_IMODE(p.stat().st_mode) == 0o640
    assert sorted(x.name for x in tmp_path.iterdir()) == ["Makefile"]

def test_failed_rename_leaves_original(tmp_path, monkeypatch):
    p = tmp_path / "Makefile"
    p.write_text("OBJS = a.o\n", encoding="utf-8")

    def boom(src, dst):
        raise OSError(28, "No space left on device")
    monkeypatch.setattr(os, "replace", boom)

    with pytest.raises(DescriptorWriteError) as ei:
        FileDescriptorStore().write_lines(str(p), ["OBJS = probes.o a.o\n"])
    assert "write failed" in str(ei.value)
    assert p.read_text(encoding="utf-8") == "OBJS = a.o\n"
    assert sorted(x.name for x in tmp_path.iterdir()) == ["Makefile"]

def test_write_into_missing_dir(tmp_path):
    with pytest.raises(DescriptorWriteError):
        FileDescriptorStore().write_lines(str(tmp_path / "nope" / "Makefile"), ["x\n"])

def test_memory_store():
    store = MemoryDescriptorStore({"Makefile": ["A = 1\n"]})
    store.write_lines("Makefile", ["B = 2\n"])
    assert store.read_lines("Makefile") == ["B = 2\n"]
    with pytest.raises(DescriptorReadError):
        store.read_lines("other")
