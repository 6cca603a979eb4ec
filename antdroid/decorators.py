import functools
import click
import sys # Import sys for sys.exc_info()
from .cli_logger import logger
from .errors import AntdroidError, ExternalToolFailure

def _exit_status(error):
    if isinstance(error, ExternalToolFailure) and error.exit_code > 0:
        return error.exit_code
    return 1

def handle_exceptions(func):
    """A decorator to handle common exceptions for CLI commands.

    Failures are logged and turned into a non-zero exit status.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.Abort:
            logger.warning("\nCommand aborted by user.")
            sys.exit(1)
        except AntdroidError as e:
            logger.error(f"Error [{e.code}]: {e}")
            logger.exception(*sys.exc_info())
            sys.exit(_exit_status(e))
        except FileNotFoundError as e:
            logger.error(f"Error: File not found - {e}")
            logger.exception(*sys.exc_info()) # Log traceback for FileNotFoundError
            sys.exit(1)
        except click.ClickException:
            raise
        except Exception as e:
            logger.error(f"\nAn unexpected error occurred: {e}")
            logger.exception(*sys.exc_info())
            sys.exit(1)
    return wrapper
