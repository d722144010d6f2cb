# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Per-module generation context.

A ModuleContext is built fresh for every module and handed to each
generator in turn. Building it performs every name lookup the generators
need, so a bad clock, reset or member name fails here, before any text for
the module exists.
"""

from dataclasses import dataclass
from typing import List

from .classifier import bound_clock_resets, split_ports
from .config import WrapperConfig
from .grouping import Method, PortGroup, build_groups, schedule_name, type_name
from .netlist.data import Module, Port


@dataclass(frozen=True)
class ModuleContext:
    module: Module
    config: WrapperConfig
    clocks: List[Port]
    resets: List[Port]
    regular_ports: List[Port]
    groups: List[PortGroup]
    group_methods: List[List[Method]]
    schedule_names: List[str]

    @classmethod
    def build(cls, module: Module, config: WrapperConfig) -> "ModuleContext":
        """Classify, group and resolve every name used for this module.

        Raises:
            ConfigurationLookupError: If a clock, reset or member name cannot be resolved
        """
        clocks, resets = bound_clock_resets(module, config)
        regular_ports = split_ports(module, config)
        groups = build_groups(regular_ports, config.sorted_groups)
        group_methods = [group.methods for group in groups]
        schedule_names = [schedule_name(port, groups) for port in regular_ports]
        return cls(
            module=module,
            config=config,
            clocks=clocks,
            resets=resets,
            regular_ports=regular_ports,
            groups=groups,
            group_methods=group_methods,
            schedule_names=schedule_names,
        )

    @property
    def interface_name(self) -> str:
        return self.config.interface_name

    @property
    def top_type_name(self) -> str:
        return type_name(self.config.interface_name)

    def group_views(self) -> List[dict]:
        """Groups paired with their resolved methods, for templates."""
        return [
            {"prefix": group.prefix, "type_name": group.type_name, "methods": methods}
            for group, methods in zip(self.groups, self.group_methods)
        ]
