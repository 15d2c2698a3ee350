"""Click subcommands."""

from .export import export_command
from .import_cmd import import_command
from .reset import reset_command
from .validate import validate_command

__all__ = ["export_command", "import_command", "reset_command", "validate_command"]
