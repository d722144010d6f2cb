# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
bsvwrap - BSV wrapper generator

Turns the port list of an already synthesized module into a grouped
Bluespec interface and an ``import "BVI"`` wrapper, so the module can be
instantiated from a BSV design.

Usage:
    python -m bsvwrap bsv design.json -c clk -r rst_n -g axi -i Top -o Top.bsv
"""

from .config import WrapperConfig, load_config
from .errors import (
    BsvWrapError,
    ConfigurationError,
    ConfigurationLookupError,
    NetlistError,
    OutputTargetError,
    TemplateError,
)
from .netlist import Design, Direction, Module, Port, read_yosys_json
from .writer import BsvWriter, generate_design

__all__ = [
    "BsvWriter",
    "generate_design",
    "WrapperConfig",
    "load_config",
    "Design",
    "Direction",
    "Module",
    "Port",
    "read_yosys_json",
    "BsvWrapError",
    "ConfigurationError",
    "ConfigurationLookupError",
    "NetlistError",
    "OutputTargetError",
    "TemplateError",
]
