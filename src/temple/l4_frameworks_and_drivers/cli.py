"""CLI entry point for temple."""

from __future__ import annotations

import logging
import sys
from typing import NoReturn

import click

from temple import __version__
from temple.l1_entities.context import RunContext
from temple.l1_entities.errors import SelectionAbortedError, TempleError

log = logging.getLogger('temple')


def _confirm(prompt: str) -> bool:
    return click.confirm(prompt, default=False)


def _fail(error: Exception) -> NoReturn:
    log.error('%s', error)
    click.echo(f'Error: {error}', err=True)
    sys.exit(1)


@click.command()
@click.option('-c', '--copy', 'to_clipboard', is_flag=True, help='Copy the template to the clipboard.')
@click.option('-i', '--init', 'init', is_flag=True, help='Download the default config file.')
@click.option(
    '--config',
    'config_path',
    default=None,
    type=click.Path(dir_okay=False),
    help='Path to a JSON or YAML config file.',
)
@click.option(
    '-o',
    '--output',
    'output',
    default=None,
    help='Destination file name (defaults to the template name).',
)
@click.option('--debug', is_flag=True, help='Write a debug log to the user log directory.')
@click.version_option(__version__, '-v', '--version', prog_name='temple', message='%(prog)s v%(version)s')
def cli(to_clipboard, init, config_path, output, debug):
    """temple -- pick a template from your catalog and copy it here."""
    from temple.l3_interface_adapters.gateways.paths import (  # noqa: PLC0415 -- deferred: platformdirs not loaded on --help
        DEFAULT_CONFIG_PATHS,
        LOG_DIR,
    )

    if debug:
        from temple.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: debug runs only
            setup_file_logging,
        )

        setup_file_logging(LOG_DIR)

    if init:
        _run_init(DEFAULT_CONFIG_PATHS[0])
        return

    from temple.l3_interface_adapters.gateways.file_config_loader import (  # noqa: PLC0415 -- deferred: yaml/pydantic stack not loaded on --help
        FileConfigLoader,
    )
    from temple.l4_frameworks_and_drivers.template_picker import (  # noqa: PLC0415 -- deferred: Textual not loaded on --help
        TemplatePicker,
        select_template,
    )

    context = RunContext.current()
    try:
        config = FileConfigLoader().load(config_path)
    except TempleError as e:
        _fail(e)

    picker = TemplatePicker(config, previewer=_build_previewer(context, config.config.syntax_highlight))
    try:
        template = select_template(picker)
    except SelectionAbortedError:
        log.info('Selection cancelled')
        return

    _run_install(context, template, output, to_clipboard)


def _build_previewer(context: RunContext, theme: str | None):
    from temple.l2_use_cases.preview_use_case import PreviewUseCase  # noqa: PLC0415 -- deferred with the picker
    from temple.l3_interface_adapters.gateways.content_sniffer import (  # noqa: PLC0415 -- deferred with the picker
        ContentSniffer,
    )
    from temple.l3_interface_adapters.gateways.rich_highlighter import (  # noqa: PLC0415 -- deferred: rich/pygments only for previews
        RichHighlighter,
    )

    return PreviewUseCase(context, ContentSniffer(), RichHighlighter(theme))


def _run_install(context: RunContext, template, output: str | None, to_clipboard: bool) -> None:
    from temple.l2_use_cases.install_use_case import (  # noqa: PLC0415 -- deferred: not needed for --help
        InstallTemplateUseCase,
    )
    from temple.l3_interface_adapters.gateways.pyperclip_clipboard import (  # noqa: PLC0415 -- deferred: clipboard backend probed lazily
        PyperclipClipboard,
    )

    installer = InstallTemplateUseCase(context, confirm=_confirm, clipboard=PyperclipClipboard())
    try:
        if to_clipboard:
            result = installer.copy_to_clipboard(template)
        else:
            result = installer.install(template, output)
    except TempleError as e:
        _fail(e)

    report = result.describe()
    if report:
        click.echo(report)


def _run_init(dest) -> None:
    from temple.l2_use_cases.init_config_use_case import (  # noqa: PLC0415 -- deferred: --init only
        DEFAULT_CONFIG_URL,
        InitConfigUseCase,
    )
    from temple.l3_interface_adapters.gateways.httpx_downloader import (  # noqa: PLC0415 -- deferred: httpx only for --init
        HttpxDownloader,
    )

    use_case = InitConfigUseCase(HttpxDownloader(), confirm=_confirm)
    try:
        written = use_case.execute(dest, DEFAULT_CONFIG_URL)
    except TempleError as e:
        _fail(e)
    if written:
        click.echo(f'{DEFAULT_CONFIG_URL} -> {dest}')
