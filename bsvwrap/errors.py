# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Exception hierarchy for bsvwrap.

Every error is fatal for the run that raised it. Each class carries the
exit code the CLI uses when it reports the error (BSD sysexits.h values).
"""

from rich.markup import escape

EX_SOFTWARE = 70
EX_DATAERR = 65
EX_NOINPUT = 66
EX_CANTCREAT = 73
EX_CONFIG = 78


class BsvWrapError(Exception):
    """Base exception for all bsvwrap errors.

    Attributes:
        message: Main error message
        details: Optional list of additional detail lines
        exit_code: Exit code used by the CLI (class attribute)
    """

    exit_code: int = 1

    def __init__(self, message: str, details: list[str] | None = None):
        self.message = message
        self.details = details or []
        super().__init__(message)

    def format_for_console(self) -> str:
        """Format error message for console output; message text is never read as markup."""
        lines = [f"[red]Error:[/red] {escape(self.message)}"]
        if self.details:
            lines.append("")
            for detail in self.details:
                lines.append(f"  • {escape(detail)}")
        return "\n".join(lines)


class ConfigurationLookupError(BsvWrapError, LookupError):
    """A configured clock, reset, module or derived member name has no port."""

    exit_code = EX_DATAERR


class OutputTargetError(BsvWrapError):
    """The output destination cannot be opened for writing."""

    exit_code = EX_CANTCREAT


class NetlistError(BsvWrapError):
    """Error reading or interpreting the input netlist."""

    exit_code = EX_NOINPUT


class ConfigurationError(BsvWrapError):
    """Error in the configuration file or command line options."""

    exit_code = EX_CONFIG


class TemplateError(BsvWrapError):
    """Error during template loading or rendering."""

    exit_code = EX_SOFTWARE
