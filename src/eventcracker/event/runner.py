import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from eventcracker.kernel.errors import DecodeError
from eventcracker.utils.fileio import FileSink, read_json

from .files import FileKind, get_event_commands, read_records
from .generate import decompile_commands, render
from .preset import PRESETS
from .symbols import SymbolTable, SymbolTableError, load_symbols

app = typer.Typer()

Dialect = Enum('Dialect', dict(zip(PRESETS.keys(), PRESETS.keys())))


@app.command('commands2py')
def commands2py(
    filename: Path = typer.Argument(..., help='Map, CommonEvents or Troops data file'),
    event_id: int = typer.Option(..., '--event-id', '-e', help='Id of the event to convert'),
    event_page: Optional[int] = typer.Option(
        None, '--event-page', '-p', help='Page of the event to convert'
    ),
    config: Optional[Path] = typer.Option(
        None, '--config', '-c', help='YAML file with names of game objects'
    ),
    output: Optional[Path] = typer.Option(
        None, '--output', '-o', help='Write result to file instead of standard output'
    ),
    dialect: Dialect = typer.Option(Dialect['mv'], '--dialect', '-d', help='Engine version'),
    overwrite: bool = typer.Option(False, '--overwrite', help='Replace existing output'),
    dry_run: bool = typer.Option(False, '--dry-run', help='Decompile without writing output'),
    verbose: bool = typer.Option(False, '--verbose', help='Trace each command for debug'),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(levelname)s: %(message)s',
    )
    preset = PRESETS[dialect.name](logger=logging.getLogger('eventcracker'))

    try:
        symbols = load_symbols(str(config)) if config else SymbolTable()
        kind = FileKind.from_path(str(filename))
        entries = get_event_commands(read_json(str(filename)), kind, event_id, event_page)
        commands = preset.assemble(read_records(entries))
        if output is None:
            if not dry_run:
                typer.echo(render(commands, symbols), nl=False)
            return
        with FileSink(str(output), overwrite=overwrite, dry_run=dry_run) as stream:
            for text in decompile_commands(commands, symbols):
                stream.write(text)
    except (DecodeError, SymbolTableError, LookupError, OSError, ValueError) as exc:
        typer.echo(f'error: {exc}', err=True)
        raise typer.Exit(code=1)
