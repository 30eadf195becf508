#!/usr/bin/env python3

import logging

import click

from aethergate import __version__
from aethergate.exit_codes import GENERAL_ERROR
from aethergate.commands.init import init_handler
from aethergate.commands.build import build_handler

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--h', '-help', '--help'])


class VerbGroup(click.Group):
    """Command group that exits with status 1 on a missing or unknown verb."""

    def parse_args(self, ctx, args):
        if not args:
            click.echo(ctx.get_help(), err=True)
            ctx.exit(GENERAL_ERROR)
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = GENERAL_ERROR
            raise

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            e.exit_code = GENERAL_ERROR
            raise


@click.group(cls=VerbGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="aethergate")
@click.option('-v', '--verbose', is_flag=True, help='Show debug logging')
def cli(verbose):
    """aethergate - Static vanity import pages for Go packages.

    Reads aethergate.toml and writes one redirect page per repository,
    each carrying the go-import meta tag the go tool looks for.
    """
    if verbose:
        logging.getLogger("aethergate").setLevel(logging.DEBUG)


cli.add_command(init_handler, name='init')
cli.add_command(build_handler, name='build')


def main():
    cli(prog_name="aethergate")

if __name__ == "__main__":
    main()
