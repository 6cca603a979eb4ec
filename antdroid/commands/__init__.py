from .build import build
from .clean import clean
from .find_apk import find_apk
from .show_properties import show_properties
from .check_reqs import check_reqs
from .config import config
from .log import log
from .version import version

__all__ = [
    "build",
    "clean",
    "find_apk",
    "show_properties",
    "check_reqs",
    "config",
    "log",
    "version",
]
