# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Reader for Yosys JSON netlists.

Yosys writes a design with ``write_json``; each module lists its ports in
declaration order together with the signal bits that make up each port.
The width of a port is the number of those bits.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from ..errors import NetlistError
from .data import Design, Direction, Module, Port

logger = logging.getLogger(__name__)


def read_yosys_json(json_path: Union[str, Path]) -> Design:
    """Load a Yosys JSON netlist file into a Design.

    Raises:
        NetlistError: If the file is missing, is not JSON, or is malformed
    """
    json_path = Path(json_path)
    if not json_path.exists():
        raise NetlistError(f"Netlist not found: {json_path}")

    try:
        with open(json_path, "r", encoding="utf-8") as f:
            design_data = json.load(f)
    except json.JSONDecodeError as e:
        raise NetlistError(f"Netlist {json_path} is not valid JSON: {e}") from e
    except OSError as e:
        raise NetlistError(f"Can't read netlist {json_path}: {e.strerror}") from e

    design = design_from_dict(design_data)
    logger.info(f"Loaded {len(design.modules)} modules from {json_path}")
    return design


def design_from_dict(design_data: Dict[str, Any]) -> Design:
    """Build a Design from an already parsed Yosys JSON document."""
    if not isinstance(design_data, dict) or not isinstance(design_data.get("modules"), dict):
        raise NetlistError("Netlist has no 'modules' table")

    modules = []
    for module_name, module_data in design_data["modules"].items():
        if not isinstance(module_data, dict):
            raise NetlistError(f"Malformed module '{module_name}': expected an object")
        modules.append(_module_from_dict(module_name, module_data))
    return Design(modules=modules)


def _module_from_dict(module_name: str, module_data: Dict[str, Any]) -> Module:
    port_table = module_data.get("ports", {})
    if not isinstance(port_table, dict):
        raise NetlistError(f"Malformed module '{module_name}': 'ports' must be an object")

    ports = []
    for port_name, port_data in port_table.items():
        if not isinstance(port_data, dict):
            raise NetlistError(
                f"Malformed port '{port_name}' in module '{module_name}': expected an object"
            )
        direction = port_data.get("direction", "")
        bits = port_data.get("bits", [])
        if not isinstance(bits, list):
            raise NetlistError(
                f"Malformed port '{port_name}' in module '{module_name}': 'bits' must be a list"
            )
        try:
            ports.append(Port(name=port_name, direction=Direction(direction), width=len(bits)))
        except ValueError as e:
            raise NetlistError(f"Malformed port '{port_name}' in module '{module_name}': {e}") from e
        logger.debug(f"{module_name}.{port_name}: {direction} [{len(bits)}]")

    attribute_table = module_data.get("attributes", {})
    if not isinstance(attribute_table, dict):
        raise NetlistError(f"Malformed module '{module_name}': 'attributes' must be an object")
    attributes = {str(key): str(value) for key, value in attribute_table.items()}
    try:
        return Module(name=module_name, ports=ports, attributes=attributes)
    except ValueError as e:
        raise NetlistError(str(e)) from e
