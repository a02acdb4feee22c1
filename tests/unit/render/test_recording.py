"""Unit tests for render/recording.py"""

from helpdoc.render.base import MarkdownRenderer
from helpdoc.render.recording import MOCK_TAG, RecordingRenderer


def test_records_exact_input():
    """The recorder observes the markdown exactly as given and tags its output."""
    mock = RecordingRenderer()
    md = "## Coreveo Help\n\n- Item 1\n- Item 2"
    rendered = mock.render(md, base_url=None)
    assert mock.last_input == md
    assert rendered.plain.startswith("[MOCK]")
    assert rendered.plain == MOCK_TAG + md


def test_whitespace_and_escapes_not_touched():
    """Leading/trailing whitespace and markup characters reach the recorder unmodified."""
    mock = RecordingRenderer()
    md = "  <b>&amp;</b>\t\n\n"
    mock.render(md)
    assert mock.last_input == md


def test_records_every_call_and_base_url():
    """Each call appends its input and base_url in order."""
    mock = RecordingRenderer()
    mock.render("a", "https://x.org/")
    mock.render("b")
    assert mock.inputs == ["a", "b"]
    assert mock.base_urls == ["https://x.org/", None]
    assert mock.last_base_url is None


def test_defaults_before_any_call():
    """Before rendering, last_input is empty and last_base_url is None."""
    mock = RecordingRenderer()
    assert mock.last_input == ""
    assert mock.last_base_url is None


def test_bytes_recorded_as_given():
    """Bytes are recorded unchanged; the output decodes them."""
    mock = RecordingRenderer(tag="")
    rendered = mock.render(b"\xff\x00")
    assert mock.last_input == b"\xff\x00"
    assert rendered.plain == "\xff\x00"


def test_custom_tag():
    """The tag prefix is configurable."""
    assert RecordingRenderer(tag="<<").render("x").plain == "<<x"


def test_satisfies_protocol():
    """RecordingRenderer is a MarkdownRenderer."""
    assert isinstance(RecordingRenderer(), MarkdownRenderer)
