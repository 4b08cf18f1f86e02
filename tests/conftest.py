"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from temple.l1_entities.config import DisplayConfig, TempleConfig
from temple.l1_entities.context import RunContext
from temple.l1_entities.errors import ClipboardError, DownloadError
from temple.l1_entities.template import Template

# --- Protocol-conforming Fakes ---


class FakeHighlighter:
    """Marks every line so tests can tell highlighted output apart."""

    def __init__(self) -> None:
        self.calls: list[tuple[Path, list[str]]] = []

    def highlight(self, path: Path, lines: list[str]) -> list[str]:
        self.calls.append((path, list(lines)))
        return [f'<{line}>' for line in lines]


class FakeBinaryDetector:
    def __init__(self, binary: set[Path] | None = None) -> None:
        self._binary = binary or set()

    def is_binary(self, path: Path) -> bool:
        return path in self._binary


class FakeClipboard:
    def __init__(self, fail: bool = False) -> None:
        self.copied: list[str] = []
        self._fail = fail

    def copy(self, text: str) -> None:
        if self._fail:
            raise ClipboardError('no clipboard backend')
        self.copied.append(text)


class FakeDownloader:
    def __init__(self, body: bytes = b'{}', error: str | None = None) -> None:
        self._body = body
        self._error = error
        self.calls: list[tuple[str, Path]] = []

    def download(self, url: str, dest: Path) -> None:
        self.calls.append((url, dest))
        if self._error:
            raise DownloadError(self._error)
        dest.write_bytes(self._body)


class RecordingConfirm:
    """Callable stand-in for an interactive yes/no prompt."""

    def __init__(self, answer: bool) -> None:
        self._answer = answer
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self._answer


# --- Standard Fixtures ---


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    d = tmp_path / 'home'
    d.mkdir()
    return d


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    d = tmp_path / 'work'
    d.mkdir()
    return d


@pytest.fixture
def run_context(home_dir: Path, work_dir: Path) -> RunContext:
    return RunContext(home_dir=home_dir, work_dir=work_dir)


@pytest.fixture
def template_dir(home_dir: Path) -> Path:
    d = home_dir / 't'
    d.mkdir()
    (d / 'a.go').write_text('package a\n\nfunc A() {}\n', encoding='utf-8')
    (d / 'b.go').write_text('package b\n\nimport "fmt"\n\nfunc B() {\n\tfmt.Println("b")\n}\n', encoding='utf-8')
    return d


@pytest.fixture
def sample_config(template_dir: Path) -> TempleConfig:
    return TempleConfig(
        config=DisplayConfig(head_size=3, item_size=5),
        templates=(
            Template(path='~/t/b.go', tags=('go', 'beta')),
            Template(path='~/t/a.go', tags=('go', 'alpha')),
        ),
    )


@pytest.fixture
def sample_config_json(tmp_path: Path) -> Path:
    content = {
        'config': {'headSize': 3, 'itemSize': 5, 'syntaxHighlight': 'monokai'},
        'templates': [
            {'path': '~/t/a.go', 'tags': ['go', 'alpha']},
            {'name': 'main.go', 'path': '~/t/b.go', 'tags': ['go', 'beta']},
        ],
    }
    p = tmp_path / 'temple.json'
    p.write_text(json.dumps(content, indent=2), encoding='utf-8')
    return p


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def fake_highlighter() -> FakeHighlighter:
    return FakeHighlighter()
