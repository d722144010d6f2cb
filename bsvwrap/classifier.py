# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Separates module ports into clocks, resets and regular ports.

Matching is exact name equality against the configured lists. A name listed
as both a clock and a reset is treated as a clock.
"""

import logging
from enum import Enum
from typing import List, Tuple

from .config import WrapperConfig
from .netlist.data import Module, Port

logger = logging.getLogger(__name__)


class PortKind(Enum):
    CLOCK = "clock"
    RESET = "reset"
    REGULAR = "regular"


def classify_port(name: str, config: WrapperConfig) -> PortKind:
    if name in config.clocks:
        return PortKind.CLOCK
    if name in config.resets:
        return PortKind.RESET
    return PortKind.REGULAR


def split_ports(module: Module, config: WrapperConfig) -> List[Port]:
    """Return the module's regular ports in declaration order."""
    regular = []
    for port in module.ports:
        kind = classify_port(port.name, config)
        logger.debug(f"{module.name}.{port.name} classified as {kind.value}")
        if kind is PortKind.REGULAR:
            regular.append(port)
    return regular


def bound_clock_resets(module: Module, config: WrapperConfig) -> Tuple[List[Port], List[Port]]:
    """Look up every configured clock and reset on the module.

    Returns:
        (clock ports, reset ports), each in configuration order

    Raises:
        ConfigurationLookupError: If a configured name is not a port of the module
    """
    clocks = [module.port(name) for name in config.clocks]
    resets = [module.port(name) for name in config.resets]
    return clocks, resets
