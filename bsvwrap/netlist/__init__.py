# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Netlist layer: design/module/port view and the Yosys JSON reader."""

from .data import Design, Direction, Module, Port
from .yosys_json import design_from_dict, read_yosys_json

__all__ = [
    "Design",
    "Direction",
    "Module",
    "Port",
    "design_from_dict",
    "read_yosys_json",
]
