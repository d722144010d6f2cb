# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import logging
import sys
from pathlib import Path

import click

from ..config import load_config
from ..netlist import read_yosys_json
from ..writer import BsvWriter, generate_design
from .utils import console, open_output, reports_errors

logger = logging.getLogger(__name__)

CLI_NAME = "bsvwrap"
PACKAGE_NAME = "bsvwrap"
CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

EXIT_INTERRUPTED = 130  # Standard SIGINT exit code
EXIT_SOFTWARE = 70


def _version_callback(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    import importlib.metadata
    version = importlib.metadata.version(PACKAGE_NAME)
    click.echo(f"{CLI_NAME}, version {version}")
    ctx.exit()


def wrapper_options(func):
    """Options shared by both generation commands."""
    options = [
        click.option("-c", "--clock", "clocks", multiple=True, metavar="NAME",
                     help="Clock port name (can specify multiple)"),
        click.option("-r", "--reset", "resets", multiple=True, metavar="NAME",
                     help="Reset port name (can specify multiple)"),
        click.option("-p", "--param", "params", multiple=True, metavar="NAME",
                     help="Parameter name (accepted, currently unused)"),
        click.option("-g", "--group", "groups", multiple=True, metavar="PREFIX",
                     help="Group ports whose names contain PREFIX into one sub-interface"),
        click.option("-i", "--interface", metavar="NAME",
                     help="Interface name; the wrapper module is mk<NAME>"),
        click.option("--config", "config_file", type=click.Path(path_type=Path),
                     help="YAML file with clocks, resets, params, groups and interface"),
        click.option("--template-dir", type=click.Path(file_okay=False, path_type=Path),
                     help="Directory with custom interface/binding/schedule templates"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("netlist", type=click.Path(path_type=Path))
@click.argument("selection", nargs=-1)
@click.option("-o", "--output", "output_file", type=click.Path(dir_okay=False, path_type=Path),
              help="Write to the specified file instead of standard output")
@wrapper_options
@reports_errors
def bsv(netlist, selection, output_file, clocks, resets, params, groups,
        interface, config_file, template_dir):
    """Write a wrapper to embed Verilog or VHDL modules in a BSV design.

    NETLIST is a Yosys JSON netlist; SELECTION names the modules to wrap
    (all modules when omitted).
    """
    config = load_config(config_file, clocks=clocks, resets=resets, params=params,
                         groups=groups, interface=interface)
    design = read_yosys_json(netlist)

    if output_file is None:
        click.echo(generate_design(design, config, selection, template_dir), nl=False)
        return

    with open_output(output_file) as f:
        BsvWriter(f, config, template_dir).write_design(design, selection)
    logger.info(f"Wrapper written to {output_file}")


@click.command("write-bsv", context_settings=CONTEXT_SETTINGS)
@click.argument("netlist", type=click.Path(path_type=Path))
@click.argument("filename", required=False, type=click.Path(dir_okay=False, path_type=Path))
@wrapper_options
@reports_errors
def write_bsv(netlist, filename, clocks, resets, params, groups,
              interface, config_file, template_dir):
    """Write a wrapper for every module of NETLIST to FILENAME (default: stdout)."""
    config = load_config(config_file, clocks=clocks, resets=resets, params=params,
                         groups=groups, interface=interface)
    design = read_yosys_json(netlist)
    logger.info("Executing BSV backend.")

    if filename is None:
        click.echo(generate_design(design, config, template_dir=template_dir), nl=False)
        return

    with open_output(filename) as f:
        BsvWriter(f, config, template_dir).write_design(design)
    logger.info(f"Wrapper written to {filename}")


def create_cli() -> click.Group:
    @click.group(name=CLI_NAME, context_settings=CONTEXT_SETTINGS)
    @click.option("-l", "--log-level",
                  type=click.Choice(["error", "warning", "info", "debug"]),
                  default="warning", metavar="LEVEL",
                  help="Set log verbosity (error|warning|info|debug)")
    @click.option("--version", is_flag=True, expose_value=False, is_eager=True,
                  callback=_version_callback, help="Show the version and exit.")
    def cli(log_level: str) -> None:
        """Generate BSV interfaces and BVI import wrappers from synthesized netlists."""
        from .._internal.logging import setup_logging
        setup_logging(level=log_level)
        logger.debug(f"{CLI_NAME} CLI initialized with log level {log_level}")

    cli.add_command(bsv)
    cli.add_command(write_bsv)
    return cli


def main() -> None:
    """Run CLI with consistent error handling."""
    try:
        create_cli()()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        console.print(f"[red]Unexpected error:[/red] {e}")
        logging.exception(f"Unexpected error in {CLI_NAME} CLI")
        sys.exit(EXIT_SOFTWARE)


if __name__ == "__main__":
    main()
