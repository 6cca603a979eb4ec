import os
import shutil
from .cli_logger import logger
from .errors import AntdroidError, MissingToolchainError
from .utils import run_shell_command

BUILD_TEMPLATE = os.path.join("tools", "lib", "build.template")


def check_ant():
    """Make sure ant is on PATH and runs. Returns the reported version string."""
    ant_path = shutil.which("ant")
    if ant_path is None:
        raise MissingToolchainError(
            "Failed to run `ant`. Please make sure you have Apache Ant installed and on your PATH."
        )
    stdout, stderr, returncode = run_shell_command([ant_path, "-version"])
    if returncode != 0:
        raise MissingToolchainError(f"`ant -version` failed (exit code {returncode}): {stderr.strip()}")
    version = stdout.strip()
    logger.verbose(f"Found {version} at {ant_path}")
    return version


def get_build_template(sdk_dir):
    """Return the path of the SDK's Ant build.xml template."""
    if not sdk_dir:
        raise MissingToolchainError(
            "ANDROID_HOME is not set. Point it at your Android SDK or set android.sdk_dir in antdroid.toml."
        )
    template_path = os.path.join(sdk_dir, BUILD_TEMPLATE)
    if not os.path.isfile(template_path):
        raise MissingToolchainError(
            f"Ant build template not found at {template_path}. "
            "The installed Android SDK tools no longer ship Ant support."
        )
    return template_path


def check_environment(sdk_dir):
    """Report on every prerequisite and return True when all of them are met."""
    logger.info("Checking Ant build environment...")
    all_ok = True

    try:
        logger.success(f"ant: {check_ant()}")
    except AntdroidError as e:
        logger.warning(str(e))
        all_ok = False

    try:
        logger.success(f"SDK build template: {get_build_template(sdk_dir)}")
    except AntdroidError as e:
        logger.warning(str(e))
        all_ok = False

    return all_ok
