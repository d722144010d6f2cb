# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""BVI import and instance binding generator."""

from typing import Any, Dict, List

from .base import GeneratorBase


class BindingGenerator(GeneratorBase):
    """Renders the import "BVI" header, clock/reset bindings and per-group blocks."""

    @property
    def template_file(self) -> str:
        return "binding.bsv.j2"

    def _get_template_context(self, context) -> Dict[str, Any]:
        return {
            "module_name": context.module.name,
            "interface_name": context.interface_name,
            "top_type_name": context.top_type_name,
            "formals": self._formals(context),
            "clocks": [port.name for port in context.clocks],
            "resets": [port.name for port in context.resets],
            "groups": context.group_views(),
        }

    @staticmethod
    def _formals(context) -> List[str]:
        """Module arguments: every clock, then every reset, in configuration order."""
        return (
            [f"Clock {port.name}" for port in context.clocks]
            + [f"Reset {port.name}" for port in context.resets]
        )
