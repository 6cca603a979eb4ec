import click
import sys
from .. import config as config_module
from ..builder import AntBuilder, BuildOptions, BUILD_TYPES
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..package_info import PackageInfo


def signing_options(func):
    """Attach the keystore options shared by build-like commands."""
    options = [
        click.option("--keystore", default=None, help="Path to the keystore used to sign release builds."),
        click.option("--alias", default=None, help="Key alias inside the keystore."),
        click.option("--store-password", default=None, help="Keystore password."),
        click.option("--password", default=None, help="Key password."),
        click.option("--keystore-type", default=None, help="Keystore type (e.g. jks, pkcs12)."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def resolve_build_options(conf, build_type=None, release=False, signing=None):
    """Merge command-line values over antdroid.toml into a BuildOptions."""
    if release:
        build_type = "release"
    build_type = build_type or config_module.get_build_type(conf)

    merged = config_module.get_signing_config(conf, build_type)
    merged.update({key: value for key, value in (signing or {}).items() if value})
    try:
        package_info = PackageInfo.from_options(**merged)
        return BuildOptions(build_type=build_type, package_info=package_info)
    except ValueError as e:
        raise click.UsageError(str(e))


def create_builder(path, conf):
    return AntBuilder(path, sdk_dir=config_module.get_sdk_dir(conf))


@click.command()
@click.pass_context
@click.option("--build-type", type=click.Choice(BUILD_TYPES), default=None, help="Build type (debug or release).")
@click.option("--release", is_flag=True, help="Shortcut for --build-type release.")
@signing_options
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@handle_exceptions
def build(ctx, build_type, release, keystore, alias, store_password, password, keystore_type, verbose):
    """Build the Android project with Apache Ant and report the generated APK."""
    logger.set_verbose(verbose)
    path = ctx.obj["path"]
    conf = config_module.load_config(path=path)
    options = resolve_build_options(conf, build_type, release, {
        "keystore": keystore,
        "alias": alias,
        "store_password": store_password,
        "password": password,
        "keystore_type": keystore_type,
    })

    builder = create_builder(path, conf)
    logger.info(f"Building {options.build_type} APK in {builder.root}...")
    builder.prepare_env(options)
    builder.build(options)

    apk = builder.locate_apk(options.build_type)
    if apk is None:
        logger.error(f"Build finished but no {options.build_type} APK was found.")
        sys.exit(1)
    logger.success(f"Build successful! APK available at {apk}")
