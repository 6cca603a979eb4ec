import click
from .commands import *


@click.group()
@click.option("--path", "-p", default=".", help="Path to the Android project directory.")
@click.pass_context
def cli(ctx, path):
    """antdroid: build Ant based Android projects."""
    ctx.obj = {"path": path}

cli.add_command(build)
cli.add_command(clean)
cli.add_command(find_apk)
cli.add_command(show_properties)
cli.add_command(check_reqs)
cli.add_command(config)
cli.add_command(log)
cli.add_command(version)

if __name__ == '__main__':
    cli()
