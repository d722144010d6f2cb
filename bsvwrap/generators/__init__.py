# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
BSV text generators.

Each generator renders one part of a module's wrapper from a ModuleContext.
"""

from .base import DEFAULT_TEMPLATE_DIR, GeneratorBase, create_environment
from .binding import BindingGenerator
from .interface import InterfaceGenerator
from .schedule import ScheduleGenerator

__all__ = [
    'DEFAULT_TEMPLATE_DIR',
    'GeneratorBase',
    'create_environment',
    'BindingGenerator',
    'InterfaceGenerator',
    'ScheduleGenerator',
]
