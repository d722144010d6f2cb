# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Schedule declaration generator.

Every regular port is declared conflict-free with every other regular port.
This is a blanket policy, not the result of any analysis of the module.
"""

from typing import Any, Dict

from .base import GeneratorBase

INDENT = " " * 8


class ScheduleGenerator(GeneratorBase):

    @property
    def template_file(self) -> str:
        return "schedule.bsv.j2"

    def _get_template_context(self, context) -> Dict[str, Any]:
        return {
            "name_list": ",\n".join(INDENT + name for name in context.schedule_names),
        }
