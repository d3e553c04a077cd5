"""
Tests for includes.paths

Test Coverage:
- normalize_include_path(): Separator handling and joining onto the
  including document's directory
"""

from pathlib import Path

from xml_compiler.includes.paths import normalize_include_path


def test_normalize_joins_onto_base_dir():
    """Resolves relative to the including document's directory."""
    base = Path("/data/sub")
    assert normalize_include_path(base, "part.xml", sep="/") == base / "part.xml"


def test_normalize_converts_backslashes_on_posix():
    """Backslash references resolve like forward-slash references."""
    base = Path("/data/sub")
    from_backslash = normalize_include_path(base, "parts\\header.xml", sep="/")
    from_slash = normalize_include_path(base, "parts/header.xml", sep="/")

    assert from_backslash == from_slash
    assert from_backslash.name == "header.xml"
    assert from_backslash.parent.name == "parts"


def test_normalize_keeps_reference_on_backslash_platform():
    """Reference is used unmodified where backslash is native."""
    result = normalize_include_path(Path("base"), "parts\\header.xml", sep="\\")
    assert str(result).endswith("parts\\header.xml")


def test_normalize_finds_real_file_with_backslash_reference(write_file, tmp_path):
    """A backslash reference locates the file on disk on any platform."""
    target = write_file("sub/parts/header.xml", "<h/>")
    result = normalize_include_path(tmp_path / "sub", "parts\\header.xml")
    assert result.exists()
    assert result.resolve() == target.resolve()


def test_normalize_parent_reference(write_file, tmp_path):
    """Paths may climb out of the including directory."""
    target = write_file("shared/footer.xml", "<f/>")
    (tmp_path / "sub").mkdir()
    result = normalize_include_path(tmp_path / "sub", "../shared/footer.xml", sep="/")
    assert result.resolve() == target.resolve()
