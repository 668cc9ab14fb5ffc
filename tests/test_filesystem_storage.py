"""Tests for the filesystem storage layout."""
import json
import pytest
from eslint_plugin_survey.infrastructure.filesystem_storage import FileSystemSearchResultStorage


def test_save_page_writes_raw_items(tmp_path):
    storage = FileSystemSearchResultStorage(tmp_path)
    items = [{"full_name": "a/eslint-plugin-a", "score": 1.0}]

    assert not storage.has_page(1)
    storage.save_page(1, items)

    assert storage.has_page(1)
    assert json.loads((tmp_path / "github-search-results" / "1.json").read_text()) == items
    assert storage.load_page(1) == items


def test_load_missing_page(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileSystemSearchResultStorage(tmp_path).load_page(1)


def test_clone_layout(tmp_path):
    storage = FileSystemSearchResultStorage(tmp_path)

    path = storage.clone_path(3, "a__eslint-plugin-a")

    assert path == tmp_path / "cloned-repositories" / "3" / "a__eslint-plugin-a"


def test_list_cloned_and_count_pages(tmp_path):
    storage = FileSystemSearchResultStorage(tmp_path)
    assert storage.count_cloned_pages() == 0
    assert storage.list_cloned(1) == []

    storage.clone_path(1, "b__eslint-plugin-b").mkdir(parents=True)
    storage.clone_path(1, "a__eslint-plugin-a").mkdir(parents=True)
    storage.clone_path(2, "c__eslint-plugin-c").mkdir(parents=True)
    (tmp_path / "cloned-repositories" / "1" / ".DS_Store").write_text("")

    assert storage.list_cloned(1) == ["a__eslint-plugin-a", "b__eslint-plugin-b"]
    assert storage.count_cloned_pages() == 2


def test_has_clone(tmp_path):
    storage = FileSystemSearchResultStorage(tmp_path)
    assert not storage.has_clone(1, "a__eslint-plugin-a")

    storage.clone_path(1, "a__eslint-plugin-a").mkdir(parents=True)

    assert storage.has_clone(1, "a__eslint-plugin-a")
    assert not storage.has_clone(2, "a__eslint-plugin-a")
