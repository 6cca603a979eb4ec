import click
from .. import config as config_module
from ..builder import BUILD_TYPES
from ..cli_logger import logger
from ..decorators import handle_exceptions
from .build import create_builder, resolve_build_options

@click.command()
@click.pass_context
@click.option("--build-type", type=click.Choice(BUILD_TYPES), default=None, help="Build type whose signing file is refreshed before cleaning.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@handle_exceptions
def clean(ctx, build_type, verbose):
    """Run `ant clean` and remove build output and generated signing files."""
    logger.set_verbose(verbose)
    path = ctx.obj["path"]
    conf = config_module.load_config(path=path)
    options = resolve_build_options(conf, build_type)

    builder = create_builder(path, conf)
    logger.info(f"Cleaning {builder.root}...")
    # ant clean needs an up to date build.xml.
    builder.prepare_env(options)
    builder.clean(options)
    logger.success("Cleaning complete.")
