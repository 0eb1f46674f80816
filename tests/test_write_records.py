import os
from datetime import date

import pytest

from label_commands.core.errors import CommandWriteError
import label_commands.core.io.write_records as write_mod
from label_commands.core.io.write_records import write_records


def test_write_records_replaces_target(tmp_path):
    out_path = tmp_path / "commands.json"
    out_path.write_text("previous", encoding="utf-8")
    write_records(str(out_path), [{"name": "a"}])
    assert out_path.read_text(encoding="utf-8") == '[\n  {\n    "name": "a"\n  }\n]'
    assert sorted(p.name for p in tmp_path.iterdir()) == ["commands.json"]


def test_write_records_failed_replace_keeps_previous(tmp_path, monkeypatch):
    out_path = tmp_path / "commands.json"
    out_path.write_text("previous", encoding="utf-8")

    def _fail(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(write_mod.os, "replace", _fail)
    with pytest.raises(CommandWriteError) as exc:
        write_records(str(out_path), [{"name": "a"}])

    assert exc.value.code == "E_FILE_WRITE"
    assert out_path.read_text(encoding="utf-8") == "previous"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["commands.json"]


def test_write_records_unserializable(tmp_path):
    out_path = tmp_path / "commands.json"
    with pytest.raises(CommandWriteError) as exc:
        write_records(str(out_path), [{"when": date(2024, 1, 1)}])
    assert exc.value.code == "E_SERIALIZE"
    assert not out_path.exists()
    assert os.listdir(tmp_path) == []
