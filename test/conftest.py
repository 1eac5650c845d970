import json
from pathlib import Path

import pytest

from dictsite.input.entries import Entry


@pytest.fixture
def write_cedict(tmp_path):
    """Write a list of entry dicts to tmp_path/cedict.json and return the path."""
    def _write(records, name="cedict.json"):
        path = tmp_path / name
        path.write_text(json.dumps(records, ensure_ascii=False), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def nihao():
    return Entry(simplified="你好", traditional="你好", pinyin="nǐ hǎo", definitions=("hello",))


@pytest.fixture
def sample_entries():
    return [
        Entry(simplified="你好", traditional="你好", pinyin="nǐ hǎo", definitions=("hello", "hi")),
        Entry(simplified="汉字", traditional="漢字", pinyin="hàn zì", definitions=("Chinese character",)),
        Entry(simplified="马", traditional="馬", pinyin="mǎ", definitions=("horse", "surname Ma")),
        Entry(simplified="〇", traditional="〇", pinyin="líng", definitions=()),
    ]


@pytest.fixture
def out_dir(tmp_path) -> Path:
    path = tmp_path / "build"
    path.mkdir()
    return path
