# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Base class for the BSV text generators.

Each generator renders one Jinja2 template against a ModuleContext and
returns the text; writing to the output stream is left to the writer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

import jinja2

from ..errors import TemplateError

if TYPE_CHECKING:
    from ..context import ModuleContext

DEFAULT_TEMPLATE_DIR = Path(__file__).parent.parent / "templates"


def create_environment(template_dir: Optional[Path] = None) -> jinja2.Environment:
    """Setup Jinja2 environment for the packaged or a custom template directory."""
    if template_dir is None:
        template_dir = DEFAULT_TEMPLATE_DIR
    if not Path(template_dir).is_dir():
        raise TemplateError(f"Template directory not found: {template_dir}")

    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir)),
        undefined=jinja2.StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )


class GeneratorBase(ABC):
    """Base class for all BSV generators."""

    def __init__(self, env: Optional[jinja2.Environment] = None):
        self.env = env if env is not None else create_environment()

    @property
    @abstractmethod
    def template_file(self) -> str:
        """Template rendered by this generator."""
        pass

    @abstractmethod
    def _get_template_context(self, context: ModuleContext) -> Dict[str, Any]:
        pass

    def render(self, context: ModuleContext) -> str:
        """Render the template for the given module context."""
        variables = self._get_template_context(context)
        try:
            template = self.env.get_template(self.template_file)
            return template.render(**variables)
        except jinja2.TemplateError as e:
            raise TemplateError(f"Template {self.template_file} failed: {e}") from e
