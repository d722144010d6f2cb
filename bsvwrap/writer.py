# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Drives wrapper generation over the modules of a design.

For each module the writer emits, in order, the interface block, the BVI
import and binding block, the schedule and the closing ``endmodule``. The
text for a module is assembled completely before it is written, so a
lookup failure leaves nothing of that module in the output.
"""

import io
import logging
from pathlib import Path
from typing import Iterable, Optional, TextIO

from .config import WrapperConfig
from .context import ModuleContext
from .generators import BindingGenerator, InterfaceGenerator, ScheduleGenerator, create_environment
from .netlist.data import Design, Module

logger = logging.getLogger(__name__)

MODULE_DELIMITER = ",\n"
MODULE_FOOTER = "endmodule\n"


class BsvWriter:
    """Writes BVI wrappers for modules to a text stream."""

    def __init__(self, stream: TextIO, config: WrapperConfig,
                 template_dir: Optional[Path] = None):
        self.stream = stream
        self.config = config
        env = create_environment(template_dir)
        self.generators = [
            InterfaceGenerator(env),
            BindingGenerator(env),
            ScheduleGenerator(env),
        ]

    def render_module(self, module: Module) -> str:
        """Return the complete wrapper text for one module."""
        context = ModuleContext.build(module, self.config)
        logger.debug(
            f"{module.name}: {len(context.regular_ports)} regular ports, "
            f"groups {[group.prefix for group in context.groups]}"
        )
        parts = [generator.render(context) for generator in self.generators]
        parts.append(MODULE_FOOTER)
        return "".join(parts)

    def write_module(self, module: Module, separator: str = "") -> None:
        """Render one module and write it, preceded by separator.

        Nothing is written if rendering fails.
        """
        logger.info(f"Generating wrapper for module {module.name}")
        text = self.render_module(module)
        self.stream.write(separator + text)

    def write_design(self, design: Design, selection: Optional[Iterable[str]] = None) -> int:
        """Write every selected module, in name order.

        Returns:
            Number of modules written
        """
        design.sort()
        modules = design.select(selection)

        for index, module in enumerate(modules):
            self.write_module(module, MODULE_DELIMITER if index else "")
        return len(modules)


def generate_design(design: Design, config: WrapperConfig,
                    selection: Optional[Iterable[str]] = None,
                    template_dir: Optional[Path] = None) -> str:
    """Render the selected modules of a design into a string."""
    buf = io.StringIO()
    BsvWriter(buf, config, template_dir).write_design(design, selection)
    return buf.getvalue()
