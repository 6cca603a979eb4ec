import click
import sys
from .. import config as config_module
from ..builder import AntBuilder, BuildOptions, BUILD_TYPES
from ..cli_logger import logger
from ..decorators import handle_exceptions

@click.command("find-apk")
@click.pass_context
@click.option("--build-type", type=click.Choice(BUILD_TYPES), default=None, help="Build type to look for.")
@click.option("--all", "show_all", is_flag=True, help="Print every matching APK instead of the first.")
@handle_exceptions
def find_apk(ctx, build_type, show_all):
    """Print the path of the APK produced by the last build."""
    path = ctx.obj["path"]
    conf = config_module.load_config(path=path)
    try:
        build_type = BuildOptions(build_type=build_type or config_module.get_build_type(conf)).build_type
    except ValueError as e:
        raise click.UsageError(str(e))

    builder = AntBuilder(path)
    apks = builder.find_output_apks(build_type)
    if not apks:
        logger.error(f"No {build_type} APK found. Run 'antdroid build' first.")
        sys.exit(1)
    for apk in (apks if show_all else apks[:1]):
        click.echo(apk)
