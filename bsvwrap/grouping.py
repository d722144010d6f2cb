# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Buckets regular ports into named sub-interfaces.

A port joins every group whose prefix occurs anywhere in its name, so one
port can land in several groups and a port that matches no prefix is
dropped from the interface and binding output. Prefixes arrive already
distinct and sorted (see WrapperConfig.sorted_groups) and groups keep that
order.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .errors import ConfigurationLookupError
from .netlist.data import Direction, Port

logger = logging.getLogger(__name__)


def type_name(prefix: str) -> str:
    """Upper-case the first character only; the rest is left as is."""
    return prefix[:1].upper() + prefix[1:]


def method_name(port_name: str, prefix: str) -> str:
    """Strip the prefix and one separator character from the front of a port name.

    The prefix length is stripped even if the prefix matched further inside
    the name.

    Raises:
        ConfigurationLookupError: If nothing is left to name the method
    """
    name = port_name[len(prefix) + 1:]
    if not name:
        raise ConfigurationLookupError(
            f"Port '{port_name}' has no member name after removing group prefix '{prefix}'"
        )
    return name


@dataclass(frozen=True)
class Method:
    """One port as seen through its group."""
    name: str
    port: Port

    @property
    def width(self) -> int:
        return self.port.width

    @property
    def kind(self) -> str:
        """'action' for inputs, 'value' for outputs, 'inout' otherwise."""
        if self.port.direction is Direction.INPUT:
            return "action"
        if self.port.direction is Direction.OUTPUT:
            return "value"
        return "inout"


@dataclass
class PortGroup:
    """Ports sharing a group prefix, in module order."""
    prefix: str
    ports: List[Port] = field(default_factory=list)

    @property
    def type_name(self) -> str:
        return type_name(self.prefix)

    @property
    def methods(self) -> List[Method]:
        return [Method(method_name(port.name, self.prefix), port) for port in self.ports]


def assign_groups(ports: Iterable[Port], prefixes: Iterable[str]) -> Dict[str, List[Port]]:
    """Map each prefix, in the given order, to the ports whose names contain it."""
    prefixes = list(prefixes)
    if not prefixes:
        return {}

    groups: Dict[str, List[Port]] = {prefix: [] for prefix in prefixes}
    for port in ports:
        matched = False
        for prefix in prefixes:
            if prefix in port.name:
                groups[prefix].append(port)
                matched = True
        if not matched:
            logger.debug(f"Port '{port.name}' matches no group and is dropped")
    return groups


def build_groups(ports: Iterable[Port], prefixes: Iterable[str]) -> List[PortGroup]:
    """Same as assign_groups but as PortGroup objects."""
    return [PortGroup(prefix, members) for prefix, members in assign_groups(ports, prefixes).items()]


def schedule_name(port: Port, groups: List[PortGroup]) -> str:
    """Method name of a port under the first group that holds it, else its own name."""
    group: Optional[PortGroup] = next((g for g in groups if port in g.ports), None)
    if group is None:
        return port.name
    return method_name(port.name, group.prefix)
