"""Gateway: Rich/Pygments syntax highlighting — implements Highlighter port."""

from __future__ import annotations

import io
from pathlib import Path

from rich.console import Console
from rich.syntax import DEFAULT_THEME, Syntax
from rich.text import Text


class RichHighlighter:
    """Highlights lines with the lexer guessed from *path* and emits 256-colour ANSI.

    *theme* is a Pygments style name (``monokai``, ``dracula``...). Rich falls
    back to the Pygments default style for unknown names.
    """

    def __init__(self, theme: str | None = None) -> None:
        self._theme = theme or DEFAULT_THEME
        self._console = Console(
            file=io.StringIO(),
            force_terminal=True,
            color_system='256',
            highlight=False,
            legacy_windows=False,
        )

    def highlight(self, path: Path, lines: list[str]) -> list[str]:
        if not lines:
            return []
        code = '\n'.join(lines)
        lexer = Syntax.guess_lexer(str(path), code)
        syntax = Syntax(code, lexer, theme=self._theme, background_color='default')
        rendered = syntax.highlight(code).split('\n', allow_blank=False)
        out = [self._to_ansi(line) for line in rendered[: len(lines)]]
        # Trailing blank lines can be folded away by the highlighter
        out += [''] * (len(lines) - len(out))
        return out

    def _to_ansi(self, line: Text) -> str:
        with self._console.capture() as capture:
            self._console.print(line, end='', soft_wrap=True)
        return capture.get()
