"""Tests for the git clone fetcher with a faked subprocess."""
import asyncio
import pytest
from eslint_plugin_survey.infrastructure.git_fetcher import CloneFailedException, GitCloneFetcher


class FakeProcess:
    def __init__(self, returncode):
        self.returncode = returncode

    async def wait(self):
        return self.returncode


def _fake_exec(calls, returncode):
    async def create_subprocess_exec(*args, **kwargs):
        calls.append((args, kwargs))
        return FakeProcess(returncode)
    return create_subprocess_exec


def test_fetch_runs_git_clone_in_parent_directory(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr(asyncio, "create_subprocess_exec", _fake_exec(calls, 0))
    destination = tmp_path / "cloned-repositories" / "1" / "eslint__eslint-plugin-markdown"

    asyncio.run(GitCloneFetcher().fetch(
        "https://github.com/eslint/eslint-plugin-markdown.git", destination
    ))

    args, kwargs = calls[0]
    assert args == (
        "git", "clone",
        "https://github.com/eslint/eslint-plugin-markdown.git",
        "eslint__eslint-plugin-markdown",
    )
    assert kwargs["cwd"] == str(destination.parent)
    assert destination.parent.is_dir()
    assert "stdout" not in kwargs  # output goes straight to the terminal


def test_fetch_raises_on_non_zero_exit(tmp_path, monkeypatch):
    monkeypatch.setattr(asyncio, "create_subprocess_exec", _fake_exec([], 128))
    destination = tmp_path / "1" / "a__eslint-plugin-a"

    with pytest.raises(CloneFailedException) as exc_info:
        asyncio.run(GitCloneFetcher().fetch("https://github.com/a/eslint-plugin-a.git", destination))

    assert exc_info.value.returncode == 128
    assert "exit code 128" in str(exc_info.value)


def test_custom_git_executable(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr(asyncio, "create_subprocess_exec", _fake_exec(calls, 0))

    asyncio.run(GitCloneFetcher("/usr/local/bin/git").fetch("url", tmp_path / "repo"))

    assert calls[0][0][0] == "/usr/local/bin/git"
