"""CLI entry point for checking the mini-greeter configuration."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from mini_greeter import __version__
from mini_greeter.l1_entities.color import RGBA
from mini_greeter.l1_entities.config import GreeterConfig
from mini_greeter.l1_entities.modifier import ModifierMask
from mini_greeter.l2_use_cases.config_schema import SETTINGS, ValueKind

log = logging.getLogger('mini_greeter.cli')


def _format_value(value: object) -> str:
    if isinstance(value, RGBA):
        return value.to_css()
    if isinstance(value, ModifierMask):
        return f'{value.name.lower()} ({int(value):#x})'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def _format_hotkey(keyval: int) -> str:
    return f'{keyval:#06x}'


def render_config(config: GreeterConfig) -> list[str]:
    """Render every resolved setting as ``key = value`` lines grouped by section."""
    lines: list[str] = []
    section = None
    for spec in SETTINGS:
        if spec.section != section:
            if lines:
                lines.append('')
            lines.append(f'[{spec.section}]')
            section = spec.section
        value = getattr(config, spec.field)
        text = _format_hotkey(value) if spec.kind is ValueKind.HOTKEY else _format_value(value)
        lines.append(f'{spec.key} = {text}')
    return lines


@click.command()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Check this key-file instead of the installed configuration.',
)
@click.option('-v', '--verbose', is_flag=True, help='Show debug diagnostics on stderr.')
@click.option('--log-file', is_flag=True, help='Also write a debug log to the user log directory.')
@click.version_option(version=__version__)
def cli(config_path, verbose, log_file):
    """mini-greeter-config -- load the greeter configuration and print the resolved values."""
    from mini_greeter.l1_entities.errors import ConfigLoadError  # noqa: PLC0415 -- deferred: not needed for --help
    from mini_greeter.l3_interface_adapters.gateways.paths import (  # noqa: PLC0415 -- deferred: platformdirs not loaded on --help
        CONFIG_FILE,
        LOG_DIR,
    )
    from mini_greeter.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: textual not loaded on --help
        DependencyContainer,
    )
    from mini_greeter.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_console_logging,
        setup_file_logging,
    )

    setup_console_logging(verbose)
    if log_file:
        setup_file_logging(LOG_DIR)

    path = Path(config_path) if config_path else CONFIG_FILE
    container = DependencyContainer()
    try:
        config = container.config_loader.load(path)
    except ConfigLoadError as e:
        log.error('%s', e)
        sys.exit(1)

    for line in render_config(config):
        click.echo(line)
