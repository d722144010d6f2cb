############################################################################
# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.
############################################################################

"""Data structures for the netlist layer.

This module defines the read-only view of a synthesized design that the
wrapper generator works from: a Design holds Modules, a Module holds its
Ports in declaration order, and each Port has a direction and a resolved
bit width.

Includes:
- Enum for Port Direction.
- Dataclasses for Port, Module and Design.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional
import logging

from ..errors import ConfigurationLookupError

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Port direction enumeration."""
    INPUT = "input"
    OUTPUT = "output"
    INOUT = "inout"


@dataclass(frozen=True)
class Port:
    """Module port representation.

    Attributes:
        name: Port identifier, unique within its module
        direction: Port direction (input/output/inout)
        width: Resolved bit count of the underlying signal
    """
    name: str
    direction: Direction
    width: int = 1

    def __post_init__(self):
        """Validate port attributes, converting string direction to Enum if needed."""
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Invalid port name: {self.name!r}")
        if not isinstance(self.direction, Direction):
            if isinstance(self.direction, str):
                try:
                    object.__setattr__(self, "direction", Direction(self.direction.lower()))
                except ValueError:
                    raise ValueError(f"Invalid port direction string: {self.direction}")
            else:
                raise ValueError(f"Invalid port direction type: {type(self.direction)}")
        if isinstance(self.width, bool) or not isinstance(self.width, int) or self.width < 1:
            raise ValueError(f"Invalid width {self.width!r} for port '{self.name}'")


@dataclass
class Module:
    """A module and its ordered port list."""
    name: str
    ports: List[Port] = field(default_factory=list)
    attributes: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        seen = set()
        for port in self.ports:
            if port.name in seen:
                raise ValueError(f"Duplicate port '{port.name}' in module '{self.name}'")
            seen.add(port.name)

    @property
    def port_names(self) -> List[str]:
        return [port.name for port in self.ports]

    def port(self, name: str) -> Port:
        """Look up a port by name.

        Raises:
            ConfigurationLookupError: If the module has no such port
        """
        for port in self.ports:
            if port.name == name:
                return port
        raise ConfigurationLookupError(
            f"Port '{name}' not found in module '{self.name}'",
            details=[f"Available ports: {', '.join(self.port_names) or '(none)'}"],
        )


@dataclass
class Design:
    """A collection of modules as supplied by the netlist reader."""
    modules: List[Module] = field(default_factory=list)

    def sort(self) -> None:
        """Order modules by name so that processing order is deterministic."""
        self.modules.sort(key=lambda module: module.name)

    def module(self, name: str) -> Module:
        for module in self.modules:
            if module.name == name:
                return module
        raise ConfigurationLookupError(
            f"Module '{name}' not found in design",
            details=[f"Available modules: {', '.join(m.name for m in self.modules) or '(none)'}"],
        )

    def select(self, names: Optional[Iterable[str]] = None) -> List[Module]:
        """Return the selected modules in design order.

        An empty or missing selection selects every module.
        """
        names = list(names or [])
        if not names:
            return list(self.modules)

        for name in names:
            self.module(name)

        wanted = set(names)
        selected = [module for module in self.modules if module.name in wanted]
        logger.debug(f"Selected {len(selected)} of {len(self.modules)} modules")
        return selected
