import click
import sys
from .. import check_reqs as check_reqs_module
from .. import config as config_module
from ..cli_logger import logger

@click.command("check-reqs")
@click.pass_context
def check_reqs(ctx):
    """Check that ant and the Android SDK Ant template are available."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if check_reqs_module.check_environment(config_module.get_sdk_dir(conf)):
        logger.success("Environment check completed successfully.")
    else:
        logger.error("Environment check found issues. Please review the warnings above.")
        sys.exit(1)
