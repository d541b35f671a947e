import glob
import os
from typing import Iterable, List, Set

import typer

from raff.kernel.errors import RaffError
from raff.kernel.ids import format_id
from raff.kernel.preset import riff
from raff.sample import build_sample
from raff.utils.funcutils import flatten

app = typer.Typer()


def get_files(globs: Iterable[str]) -> Set[str]:
    return set(flatten(glob.iglob(fname) for fname in globs))


@app.command('map')
def map_chunks(
    files: List[str] = typer.Argument(..., help='Files to read from'),
    strict: bool = typer.Option(False, '--strict', help='Fail on non-zero padding'),
) -> None:
    cfg = riff(strict=strict)
    for filename in sorted(get_files(files)):
        basename = os.path.basename(filename)
        print(f'Mapping file: {basename}')
        try:
            with cfg.open_path(filename) as container:
                cfg.render(container.root)
        except RaffError as exc:
            typer.echo(f'{basename}: {exc}', err=True)
            raise typer.Exit(1)


@app.command('find')
def find_chunks(
    filename: str = typer.Argument(..., help='File to read from'),
    pattern: str = typer.Argument(..., help='Chunk ID pattern, e.g. "LI{}"'),
) -> None:
    with riff.open_path(filename) as container:
        for chunk in riff.findall(pattern, riff.chunk_as_list(container.root)):
            print(f'{format_id(chunk.id)} {chunk.kind.value} {chunk.size}')


@app.command('sample')
def sample(
    output: str = typer.Argument('sample.wav', help='Target file'),
) -> None:
    container, wave = build_sample()
    with container:
        riff.serialize_to_sink(wave, output)
    print(f'Generated: {output}')


if __name__ == '__main__':
    app()
