#!/usr/bin/env python3
"""
Hue Control CLI
Manage a Philips Hue bridge: pairing, lights, schedules, scenes, groups,
sensors and rules.
"""

import click

from commands.dispatcher import dispatch


class RawArgumentsCommand(click.Command):
    """Command that keeps the argument list exactly as given.

    Click's parser treats '--' as end-of-options and drops it; the
    dispatcher needs every argument untouched to match on count.
    """

    def parse_args(self, ctx, args):
        ctx.meta['raw_args'] = list(args)
        return super().parse_args(ctx, args)


@click.command(
    cls=RawArgumentsCommand,
    context_settings={
        'ignore_unknown_options': True,
        'allow_interspersed_args': False,
    },
    add_help_option=False,
)
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx, args):
    """Hue Control CLI - talk to a Philips Hue bridge over its REST API.

Run 'set-bridge-ip-address <ip-address>' then 'create-user' for first-time setup.
Run without arguments to list all commands."""
    ctx.exit(dispatch([ctx.info_name, *ctx.meta['raw_args']]))


def main():
    cli()


if __name__ == '__main__':
    main()
