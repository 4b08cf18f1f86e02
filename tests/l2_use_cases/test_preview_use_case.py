"""Tests for PreviewUseCase — head truncation, binary marker, read errors."""

from __future__ import annotations

from pathlib import Path

import pytest

from temple.l1_entities.context import RunContext
from temple.l2_use_cases.preview_use_case import BINARY_MARKER, PreviewUseCase, format_head, split_lines
from tests.conftest import FakeBinaryDetector, FakeHighlighter


@pytest.fixture
def previewer(run_context: RunContext, fake_highlighter: FakeHighlighter) -> PreviewUseCase:
    return PreviewUseCase(run_context, FakeBinaryDetector(), fake_highlighter)


class TestFormatHead:
    def test_numbers_are_right_aligned(self):
        assert format_head(['a', 'b']) == '   1 a\n   2 b'

    def test_wide_numbers(self):
        out = format_head(['x'] * 12).splitlines()
        assert out[-1] == '  12 x'


class TestSplitLines:
    def test_trailing_newline_adds_no_line(self):
        assert split_lines('a\nb\n') == ['a', 'b']

    def test_blank_lines_kept(self):
        assert split_lines('a\n\nb') == ['a', '', 'b']

    def test_crlf_stripped(self):
        assert split_lines('a\r\nb\r\n') == ['a', 'b']

    def test_other_separators_stay_inside_line(self):
        assert split_lines('a\x0cb\x0bc\u2028d\n') == ['a\x0cb\x0bc\u2028d']

    def test_empty(self):
        assert split_lines('') == []


class TestPreview:
    def test_truncates_to_head_size(self, previewer: PreviewUseCase, template_dir: Path):
        out = previewer.preview('~/t/b.go', 3)
        assert out.splitlines() == ['   1 <package b>', '   2 <>', '   3 <import "fmt">']

    def test_short_file_returns_all_lines(self, previewer: PreviewUseCase, template_dir: Path):
        out = previewer.preview('~/t/a.go', 100)
        assert len(out.splitlines()) == 3

    def test_form_feed_does_not_split_lines(self, previewer: PreviewUseCase, home_dir: Path):
        (home_dir / 'ff.c').write_bytes(b'int a;\x0cint b;\nint c;\n')
        out = previewer.preview('~/ff.c', 10)
        assert out.split('\n') == ['   1 <int a;\x0cint b;>', '   2 <int c;>']

    def test_zero_head_size_is_empty(self, previewer: PreviewUseCase, template_dir: Path):
        assert previewer.preview('~/t/a.go', 0) == ''

    def test_empty_file(self, previewer: PreviewUseCase, home_dir: Path):
        (home_dir / 'empty.txt').write_text('', encoding='utf-8')
        assert previewer.preview('~/empty.txt', 5) == ''

    def test_highlighter_receives_expanded_path(
        self,
        previewer: PreviewUseCase,
        fake_highlighter: FakeHighlighter,
        template_dir: Path,
    ):
        previewer.preview('~/t/a.go', 1)
        path, lines = fake_highlighter.calls[0]
        assert path == template_dir / 'a.go'
        assert lines == ['package a']

    @pytest.mark.parametrize('head_size', [0, 1, 50])
    def test_binary_returns_marker(self, run_context: RunContext, home_dir: Path, head_size: int):
        blob = home_dir / 'logo.png'
        blob.write_bytes(b'\x89PNG\x00\x00')
        previewer = PreviewUseCase(run_context, FakeBinaryDetector({blob}), FakeHighlighter())
        assert previewer.preview('~/logo.png', head_size) == BINARY_MARKER

    def test_missing_file_returns_error_text(self, previewer: PreviewUseCase):
        out = previewer.preview('~/nope.txt', 5)
        assert 'nope.txt' in out

    def test_undecodable_file_returns_error_text(self, previewer: PreviewUseCase, home_dir: Path):
        (home_dir / 'latin1.txt').write_bytes(b'caf\xe9\n')
        out = previewer.preview('~/latin1.txt', 5)
        assert 'utf-8' in out.lower()
