"""Unit tests for core/help.py"""

import logging

from helpdoc.core.help import PLACEHOLDER_HELP, find_help_file, load_help, locate_help


def test_find_help_file_direct_hit_in_order(tmp_path):
    """The first directory that directly contains the file wins."""
    first, second = tmp_path / "a", tmp_path / "b"
    first.mkdir()
    second.mkdir()
    (second / "HELP.md").write_text("second")
    (first / "HELP.md").write_text("first")
    assert find_help_file("HELP.md", [first, second]) == first / "HELP.md"


def test_find_help_file_recursive(tmp_path):
    """A file nested below a search dir is found when no direct hit exists."""
    nested = tmp_path / "Resources" / "docs"
    nested.mkdir(parents=True)
    (nested / "HELP.md").write_text("# Help")
    assert find_help_file("HELP.md", [tmp_path / "missing", tmp_path]) == nested / "HELP.md"


def test_find_help_file_missing(tmp_path):
    """Missing files and directories yield None."""
    assert find_help_file("HELP.md", [tmp_path, tmp_path / "nope"]) is None


def test_load_help_reads_text(tmp_path):
    """load_help returns the file content."""
    (tmp_path / "HELP.md").write_text("# Help\n\nBody.", encoding="utf-8")
    assert load_help("HELP.md", [tmp_path]) == "# Help\n\nBody."


def test_load_help_replaces_undecodable_bytes(tmp_path):
    """Bytes that are not UTF-8 are replaced rather than failing."""
    (tmp_path / "HELP.md").write_bytes(b"ok \xff")
    assert load_help("HELP.md", [tmp_path]) == "ok \ufffd"


def test_load_help_placeholder(tmp_path, caplog):
    """A missing help file yields the placeholder document and a warning."""
    with caplog.at_level(logging.WARNING, logger="helpdoc.core.help"):
        text = load_help("HELP.md", [tmp_path])
    assert text == PLACEHOLDER_HELP.format(name="HELP.md")
    assert "not bundled" in text
    assert "HELP.md not found" in caplog.text


def test_locate_help_returns_file_it_read(tmp_path):
    """locate_help pairs the text with the path of the file it came from."""
    nested = tmp_path / "docs" / "en"
    nested.mkdir(parents=True)
    (nested / "HELP.md").write_text("nested", encoding="utf-8")
    text, path = locate_help("HELP.md", iter([tmp_path / "missing", tmp_path]))
    assert text == "nested"
    assert path == nested / "HELP.md"


def test_locate_help_placeholder_has_no_path(tmp_path):
    """Without a bundled file the path is None."""
    text, path = locate_help("HELP.md", [tmp_path])
    assert text == PLACEHOLDER_HELP.format(name="HELP.md")
    assert path is None
