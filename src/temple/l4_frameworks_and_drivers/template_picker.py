"""Template picker — searchable list of catalog templates with a content preview."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Key
from textual.widgets import Input, ListItem, ListView, Static

from temple.l1_entities.config import TempleConfig
from temple.l1_entities.errors import SelectionAbortedError
from temple.l1_entities.template import Template
from temple.l2_use_cases.matcher import filter_templates, sort_templates
from temple.l2_use_cases.preview_use_case import PreviewUseCase


class TemplateItem(ListItem):
    """Selectable row representing a single template."""

    def __init__(self, template: Template) -> None:
        super().__init__()
        self.template = template

    def compose(self) -> ComposeResult:
        label = Text(self.template.path)
        if self.template.tags:
            label.append(f'  {", ".join(self.template.tags)}', style='dim')
        yield Static(label)


class _TemplateListView(ListView):
    """ListView that pops focus back to the search input when up is pressed on the first item."""

    def on_key(self, event: Key) -> None:
        if event.key == 'up' and self.index == 0:
            self.app.query_one('#search-input', Input).focus()
            event.prevent_default()


class TemplatePicker(App[Template | None]):
    CSS = """
    #picker-header {
        dock: top;
        height: 1;
        background: $primary;
        color: $text;
        text-align: center;
        text-style: bold;
        padding: 0 1;
    }
    #picker-footer {
        dock: bottom;
        height: 1;
        background: $surface;
        color: $text-muted;
        text-align: center;
        padding: 0 1;
    }
    #picker-layout {
        height: 1fr;
    }
    #list-pane {
        width: 1fr;
        min-width: 24;
        max-width: 60;
    }
    #search-input {
        margin: 0 0 1 0;
    }
    #template-list {
        border: solid $primary;
        scrollbar-size: 1 1;
    }
    #template-detail {
        width: 2fr;
        border: solid $secondary;
        padding: 1 2;
        scrollbar-size: 1 1;
    }
    #detail {
        height: auto;
    }
    """

    BINDINGS = [
        Binding('escape', 'cancel', 'Cancel', priority=True),
        Binding('ctrl+c', 'cancel', 'Cancel', show=False, priority=True),
        Binding('enter', 'select_template', 'Select', priority=True),
    ]

    def __init__(self, config: TempleConfig, previewer: PreviewUseCase, **kwargs):
        super().__init__(**kwargs)
        self._settings = config.config
        self._templates = sort_templates(config.templates)
        self._previewer = previewer
        self._previews: dict[str, str] = {}
        self._visible: list[Template] = []
        self._current: Template | None = None

    def compose(self) -> ComposeResult:
        count = len(self._templates)
        yield Static(f'  Select a template ({count} available)', id='picker-header')
        with Horizontal(id='picker-layout'):
            with Vertical(id='list-pane'):
                yield Input(placeholder='Search templates...', id='search-input')
                yield _TemplateListView(id='template-list')
            with VerticalScroll(id='template-detail', can_focus=False):
                yield Static('', id='detail')
        yield Static(r'\[Enter] Select  \[↑/↓] Navigate  \[Esc] Cancel', id='picker-footer', markup=True)

    def on_mount(self) -> None:
        # item_size rows plus the two border lines
        self.query_one('#template-list', _TemplateListView).styles.height = self._settings.item_size + 2
        self._rebuild_list()
        self.query_one('#search-input', Input).focus()

    def on_key(self, event: Key) -> None:
        if event.key == 'down' and self.focused is self.query_one('#search-input', Input):
            self.query_one('#template-list', _TemplateListView).focus()
            event.prevent_default()

    def on_input_changed(self, event: Input.Changed) -> None:
        self._rebuild_list(event.value)

    def _rebuild_list(self, query: str = '') -> None:
        """Rebuild the ListView contents, filtered by *query*."""
        list_view = self.query_one('#template-list', _TemplateListView)
        list_view.clear()

        self._visible = filter_templates(self._templates, query, self._settings.match_policy)
        for template in self._visible:
            list_view.append(TemplateItem(template))

        if self._visible:
            list_view.index = 0
            self._current = self._visible[0]
            self._show_detail(self._visible[0])
        else:
            self._current = None
            self.query_one('#detail', Static).update(Text('No matching templates', style='italic'))

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        if isinstance(event.item, TemplateItem):
            self._current = event.item.template
            self._show_detail(event.item.template)

    def _preview(self, template: Template) -> str:
        if template.path not in self._previews:
            self._previews[template.path] = self._previewer.preview(template.path, self._settings.head_size)
        return self._previews[template.path]

    def _show_detail(self, template: Template) -> None:
        detail = Text()
        for label, value in (
            ('Name:', template.name),
            ('Path:', template.path),
            ('Tags:', ', '.join(template.tags)),
        ):
            detail.append(f'{label:<9}', style='dim')
            detail.append(f'{value}\n')
        detail.append('Content:\n', style='dim')
        detail.append_text(Text.from_ansi(self._preview(template)))
        self.query_one('#detail', Static).update(detail)

    def action_select_template(self) -> None:
        if self._current is None:
            return
        self.exit(self._current)

    def action_cancel(self) -> None:
        self.exit(None)


def select_template(picker: TemplatePicker) -> Template:
    """Run *picker* and return the chosen template."""
    chosen = picker.run()
    if chosen is None:
        raise SelectionAbortedError('No template selected')
    return chosen
