import io

from bs4 import BeautifulSoup

import pytest

from dictsite.common.config import SiteConfig
from dictsite.common.errors import DataSourceError, ParseError, SetupError
from dictsite.input.entries import Entry
from dictsite.output.pages import render_entry_html
from dictsite.output.processing import (
    RenderFailure,
    build_site,
    prepare_output_dir,
    run,
)
from dictsite.output.progress import ProgressReporter


def _quiet_reporter():
    return ProgressReporter(io.StringIO())


def _anchors(out_dir):
    soup = BeautifulSoup((out_dir / "index.html").read_text(encoding="utf-8"), "html.parser")
    return [a["href"] for a in soup.find_all("a")]


def test_build_writes_one_page_per_entry(sample_entries, out_dir):
    result = build_site(sample_entries, out_dir, workers=3, reporter=_quiet_reporter())

    assert result.ok
    assert result.total == result.written == len(sample_entries)
    assert result.index_path == out_dir / "index.html"
    names = sorted(p.name for p in out_dir.glob("*.html"))
    assert names == sorted(["index.html"] + [f"{e.simplified}.html" for e in sample_entries])
    for entry in sample_entries:
        assert (out_dir / f"{entry.simplified}.html").read_text(encoding="utf-8") == render_entry_html(entry)


def test_index_links_in_input_order(out_dir):
    entries = [Entry(f"词{i}", f"詞{i}", f"cí {i}", (f"word {i}",)) for i in range(50)]

    build_site(entries, out_dir, workers=4, reporter=_quiet_reporter())

    assert _anchors(out_dir) == [f"词{i}.html" for i in range(50)]


@pytest.mark.parametrize("workers", [1, 2, 10])
def test_counter_reaches_total(workers, out_dir):
    entries = [Entry(f"字{i}", f"字{i}", "zì", ()) for i in range(10)]
    stream = io.StringIO()
    reporter = ProgressReporter(stream)

    build_site(entries, out_dir, workers=workers, reporter=reporter)

    assert reporter.count == 10
    assert stream.getvalue().endswith("] 100%\n")


def test_nihao_scenario(nihao, out_dir):
    build_site([nihao], out_dir, reporter=_quiet_reporter())

    page = BeautifulSoup((out_dir / "你好.html").read_text(encoding="utf-8"), "html.parser")
    assert page.h1.get_text() == "你好"
    assert "hello" in [p.get_text() for p in page.find_all("p")]
    assert _anchors(out_dir) == ["你好.html"]


def test_duplicate_keys_leave_one_intact_page(out_dir):
    first = Entry("x", "x", "first", ("a much longer definition " * 20,))
    second = Entry("x", "x", "second", ("short",))

    result = build_site([first, second], out_dir, workers=2, reporter=_quiet_reporter())

    assert result.ok
    assert sorted(p.name for p in out_dir.glob("*.html")) == ["index.html", "x.html"]
    content = (out_dir / "x.html").read_text(encoding="utf-8")
    assert content in (render_entry_html(first), render_entry_html(second))
    assert _anchors(out_dir) == ["x.html", "x.html"]
    assert [p.name for p in out_dir.iterdir() if p.suffix == ".tmp"] == []


def test_empty_input(out_dir):
    stream = io.StringIO()

    result = build_site([], out_dir, reporter=ProgressReporter(stream))

    assert result.total == 0 and result.ok
    assert [p.name for p in out_dir.glob("*.html")] == ["index.html"]
    assert _anchors(out_dir) == []
    assert stream.getvalue() == ""


def test_write_failure_is_isolated(sample_entries, out_dir):
    # A folder with the page's name can't be replaced by a file
    (out_dir / "汉字.html").mkdir()
    stream = io.StringIO()
    reporter = ProgressReporter(stream)

    result = build_site(sample_entries, out_dir, workers=2, reporter=reporter)

    assert [f.key for f in result.failures] == ["汉字"]
    assert isinstance(result.failures[0], RenderFailure)
    assert result.written == len(sample_entries) - 1
    assert reporter.count == len(sample_entries)
    assert "[render] [error]" in stream.getvalue()
    assert stream.getvalue().endswith("] 100%\n")
    assert "汉字.html" in _anchors(out_dir)
    for entry in sample_entries:
        if entry.simplified != "汉字":
            assert (out_dir / f"{entry.simplified}.html").is_file()


def test_prepare_output_dir_clears_html_only(tmp_path):
    out_dir = tmp_path / "build"
    out_dir.mkdir()
    (out_dir / "old.html").write_text("old", encoding="utf-8")
    (out_dir / "index.html").write_text("old", encoding="utf-8")
    (out_dir / "CNAME").write_text("example.org", encoding="utf-8")

    assert prepare_output_dir(out_dir) == 2
    assert [p.name for p in out_dir.iterdir()] == ["CNAME"]


def test_prepare_output_dir_creates_folder(tmp_path):
    assert prepare_output_dir(tmp_path / "docs" / "site") == 0
    assert (tmp_path / "docs" / "site").is_dir()


def test_prepare_output_dir_setup_error(tmp_path):
    blocker = tmp_path / "build"
    blocker.write_text("not a folder", encoding="utf-8")

    with pytest.raises(SetupError):
        prepare_output_dir(blocker)


def test_run_twice_is_idempotent(write_cedict, tmp_path, capsys):
    write_cedict([
        {"traditional": "你好", "simplified": "你好", "pinyin": "nǐ hǎo", "definitions": ["hello"]},
        {"traditional": "馬", "simplified": "马", "pinyin": "mǎ", "definitions": ["horse"]},
    ])
    config = SiteConfig(root=tmp_path, workers=2)

    run(config)
    (config.output_dir / "removed.html").write_text("stale", encoding="utf-8")
    result = run(config)

    assert result.ok
    assert sorted(p.name for p in config.output_dir.glob("*.html")) == [
        "index.html", "你好.html", "马.html",
    ]


def test_run_bad_input_leaves_output_untouched(tmp_path):
    config = SiteConfig(root=tmp_path)
    config.output_dir.mkdir()
    (config.output_dir / "keep.html").write_text("previous site", encoding="utf-8")

    with pytest.raises(DataSourceError):
        run(config)

    (tmp_path / "cedict.json").write_text("not json", encoding="utf-8")
    with pytest.raises(ParseError):
        run(config)

    assert (config.output_dir / "keep.html").read_text(encoding="utf-8") == "previous site"


def test_unencodable_page_fails_alone(out_dir):
    entries = [
        Entry("a", "a", "", ("\ud800",)),
        Entry("b", "b", "", ("bee",)),
    ]
    stream = io.StringIO()
    reporter = ProgressReporter(stream)

    result = build_site(entries, out_dir, workers=2, reporter=reporter)

    assert [f.key for f in result.failures] == ["a"]
    assert reporter.count == 2
    assert stream.getvalue().endswith("] 100%\n")
    assert (out_dir / "b.html").is_file()
    assert not (out_dir / "a.html").exists()
    assert _anchors(out_dir) == ["a.html", "b.html"]
