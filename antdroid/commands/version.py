import click
import importlib.metadata
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of antdroid."""
    try:
        ver = importlib.metadata.version("antdroid")
        logger.info(f"antdroid version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of antdroid. Is it installed correctly?")
