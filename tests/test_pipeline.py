from pathlib import Path

import pytest

from md2html.converters.page import PageOptions
from md2html.errors import ConfigError, InputNotFound, OutputWriteError, ThemeNotFound
from md2html.pipeline import convert_file, output_path_for, validate_naming


def test_output_naming_policies():
    assert output_path_for("notes.md") == Path("notes.html")
    assert output_path_for("docs/guide.markdown") == Path("docs/guide.html")
    assert output_path_for("docs/README") == Path("docs/README.html")
    assert output_path_for("docs/notes.md", naming="fixed") == Path("output.html")
    assert output_path_for("notes.md", naming="fixed", output="x/y.html") == Path("x/y.html")
    with pytest.raises(ConfigError):
        output_path_for("notes.md", naming="sideways")


def test_naming_policy_is_case_insensitive():
    assert validate_naming("Fixed") == "fixed"
    assert output_path_for("notes.md", naming=" REPLACE ") == Path("notes.html")
    with pytest.raises(ConfigError, match="Unknown naming policy"):
        validate_naming("")


def test_convert_file_writes_one_document(tmp_path):
    src = tmp_path / "doc.md"
    src.write_text("# Hello\n\nWorld\n", encoding="utf-8")
    out = convert_file(src, tmp_path / "doc.html")

    assert out == tmp_path / "doc.html"
    html = out.read_text(encoding="utf-8")
    assert '<h1 id="hello">Hello</h1>' in html
    assert "<p>World</p>" in html
    assert "<title>doc.md</title>" in html
    assert sorted(p.name for p in tmp_path.iterdir()) == ["doc.html", "doc.md"]


def test_convert_file_overwrites_existing_output(tmp_path):
    src = tmp_path / "a.md"
    src.write_text("new", encoding="utf-8")
    dest = tmp_path / "a.html"
    dest.write_text("old", encoding="utf-8")
    convert_file(src, dest, PageOptions(title="a"))
    assert "<p>new</p>" in dest.read_text(encoding="utf-8")


def test_code_block_survives_end_to_end(tmp_path):
    src = tmp_path / "code.md"
    src.write_text("```\nx = [i for i in range(3) if i < 2]\n```\n", encoding="utf-8")
    html = convert_file(src, tmp_path / "code.html").read_text(encoding="utf-8")
    assert "<pre><code>x = [i for i in range(3) if i &lt; 2]\n</code></pre>" in html


def test_missing_input_raises_and_writes_nothing(tmp_path):
    with pytest.raises(InputNotFound):
        convert_file(tmp_path / "nope.md", tmp_path / "nope.html")
    assert list(tmp_path.iterdir()) == []


def test_directory_as_input_is_not_found(tmp_path):
    with pytest.raises(InputNotFound):
        convert_file(tmp_path, tmp_path / "out.html")


def test_unwritable_output_raises(tmp_path):
    src = tmp_path / "a.md"
    src.write_text("# A", encoding="utf-8")
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(OutputWriteError):
        convert_file(src, blocker / "a.html")


def test_refuses_to_overwrite_input(tmp_path):
    src = tmp_path / "page.html"
    src.write_text("# keep me", encoding="utf-8")
    with pytest.raises(OutputWriteError):
        convert_file(src, tmp_path / "page.html")
    assert src.read_text(encoding="utf-8") == "# keep me"


def test_unknown_theme_fails_before_writing(tmp_path):
    src = tmp_path / "a.md"
    src.write_text("# A", encoding="utf-8")
    with pytest.raises(ThemeNotFound):
        convert_file(src, tmp_path / "a.html", PageOptions(theme="neon"))
    assert not (tmp_path / "a.html").exists()
