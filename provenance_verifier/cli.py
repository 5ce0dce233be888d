
import click

from .config import Settings
from .logging_setup import configure_logging
from .manifest import pretty
from .mime import detect_mime_type
from .stats import VerificationStats
from .verifier import parse_manifest, verify_bytes


def _emit(res, details: bool):
    out = res.to_dict()
    if not details:
        out.pop('raw_manifest', None)
    click.echo(pretty(out))


@click.group()
@click.pass_context
def cli(ctx):
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.option('--mime-type', help='Media type to pass to the trust engine (sniffed when omitted)')
@click.option('--details', is_flag=True, help='Include the raw manifest store')
@click.pass_obj
def verify(settings, path, mime_type, details):
    """Verify a media file and print the JSON result."""
    with open(path, 'rb') as f:
        data = f.read()
    mime_type = mime_type or detect_mime_type(data, path, default=settings.default_mime_type)
    _emit(verify_bytes(data, mime_type=mime_type), details)


@cli.command()
@click.argument('manifest', type=click.File('r', encoding='utf-8'))
@click.option('--details', is_flag=True, help='Include the raw manifest store')
def parse(manifest, details):
    """Normalize an already extracted manifest store JSON file ('-' for stdin)."""
    _emit(parse_manifest(manifest.read()), details)


@cli.command()
@click.argument('paths', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option('--mime-type', help='Media type for every file (sniffed per file when omitted)')
@click.pass_obj
def batch(settings, paths, mime_type):
    """Verify several files; print each status and a summary."""
    stats = VerificationStats()
    results = {}
    for p in paths:
        with open(p, 'rb') as f:
            data = f.read()
        mt = mime_type or detect_mime_type(data, p, default=settings.default_mime_type)
        res = verify_bytes(data, mime_type=mt)
        stats = stats.record(res.status)
        out = res.to_dict()
        out.pop('raw_manifest', None)
        results[p] = out
    click.echo(pretty({'results': results, 'stats': stats.to_dict()}))


if __name__ == '__main__':
    cli()
