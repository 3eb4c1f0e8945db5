"""
Tests for saving generated editors.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from editor_generator.pipeline import EditorWriter, GeneratedSource, OutputConfig, OutputMode


def make_source(path: Path | None = None, text: str = "public class FooEditor : Editor\n{\n}\n") -> GeneratedSource:
    return GeneratedSource(text=text, file_name="FooEditor.cs", path=path)


def test_save_writes_file(tmp_path):
    target = tmp_path / "Editor" / "FooEditor.cs"

    written = EditorWriter().save(make_source(target))

    assert written == target
    assert target.read_text() == make_source().text
    # No temporary files left behind
    assert [p.name for p in target.parent.iterdir()] == ["FooEditor.cs"]


def test_explicit_path_overrides_source_path(tmp_path):
    target = tmp_path / "Other.cs"
    written = EditorWriter().save(make_source(tmp_path / "FooEditor.cs"), target)

    assert written == target
    assert target.exists()
    assert not (tmp_path / "FooEditor.cs").exists()


def test_save_without_path_is_cancelled(tmp_path, caplog):
    with caplog.at_level("INFO"):
        assert EditorWriter().save(make_source()) is None
    assert "cancelled" in caplog.text
    assert list(tmp_path.iterdir()) == []


def test_existing_file_raises_without_confirmation(tmp_path):
    target = tmp_path / "FooEditor.cs"
    target.write_text("old")

    with pytest.raises(FileExistsError):
        EditorWriter().save(make_source(target))
    assert target.read_text() == "old"


def test_declined_overwrite_is_cancelled(tmp_path):
    target = tmp_path / "FooEditor.cs"
    target.write_text("old")
    asked = []

    def decline(path):
        asked.append(path)
        return False

    assert EditorWriter(confirm_overwrite=decline).save(make_source(target)) is None
    assert asked == [target]
    assert target.read_text() == "old"


def test_confirmed_overwrite_replaces_stale_file(tmp_path):
    target = tmp_path / "FooEditor.cs"
    target.write_text("old")

    written = EditorWriter(confirm_overwrite=lambda path: True).save(make_source(target))

    assert written == target
    assert target.read_text() == make_source().text


def test_force_mode_replaces_without_asking(tmp_path):
    target = tmp_path / "FooEditor.cs"
    target.write_text("old")

    def never_called(path):
        raise AssertionError("force mode must not prompt")

    writer = EditorWriter(OutputConfig(mode=OutputMode.FORCE), confirm_overwrite=never_called)
    assert writer.save(make_source(target)) == target
    assert target.read_text() == make_source().text


def test_non_atomic_write(tmp_path):
    target = tmp_path / "FooEditor.cs"
    target.write_text("old")

    writer = EditorWriter(OutputConfig(mode=OutputMode.FORCE, atomic_write=False))
    writer.save(make_source(target))

    assert target.read_text() == make_source().text


def test_line_endings_are_preserved(tmp_path):
    target = tmp_path / "FooEditor.cs"
    EditorWriter().save(make_source(target, text="a\nb\n"))
    assert target.read_bytes() == b"a\nb\n"
