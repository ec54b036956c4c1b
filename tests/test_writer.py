"""結果出力のテスト。"""

from __future__ import annotations

import io

import pytest

from html_grep.errors import WriteError
from html_grep.writer import write_result


@pytest.mark.light
def test_write_result_to_stream_appends_newline():
    out = io.StringIO()
    write_result('<div id="x"></div>', stream=out)
    assert out.getvalue() == '<div id="x"></div>\n'


@pytest.mark.light
def test_write_result_overwrites_output_file(tmp_path):
    path = tmp_path / "out.html"
    path.write_text("old content that is much longer than the new markup", encoding="utf-8")
    out = io.StringIO()

    write_result('<div id="x"></div>', output_path=str(path), stream=out)

    assert path.read_text(encoding="utf-8") == '<div id="x"></div>'
    assert out.getvalue() == f"Output saved to {path}\n"


@pytest.mark.light
def test_write_result_invalid_path_raises_write_error(tmp_path):
    path = tmp_path / "no-such-dir" / "out.html"
    with pytest.raises(WriteError) as excinfo:
        write_result("<p></p>", output_path=str(path), stream=io.StringIO())
    assert excinfo.value.kind == "write"
    assert str(excinfo.value).startswith("Error writing to output file:")


@pytest.mark.light
def test_write_result_keeps_newlines_untranslated(tmp_path):
    path = tmp_path / "out.html"
    markup = '<pre id="p">line1\nline2\n</pre>'

    write_result(markup, output_path=str(path), stream=io.StringIO())

    assert path.read_bytes() == markup.encode("utf-8")
