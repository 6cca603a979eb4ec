from .command_executor import run_shell_command, spawn
from .generated_file import MARKER, HEADER, is_generated, write_generated, write_if_absent, remove_if_generated
