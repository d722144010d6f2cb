# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Interface declaration generator."""

from typing import Any, Dict

from .base import GeneratorBase


class InterfaceGenerator(GeneratorBase):
    """Renders one always-ready/always-enabled interface per group plus the aggregate."""

    @property
    def template_file(self) -> str:
        return "interface.bsv.j2"

    def _get_template_context(self, context) -> Dict[str, Any]:
        return {
            "groups": context.group_views(),
            "top_type_name": context.top_type_name,
        }
