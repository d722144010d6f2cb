# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Wrapper generation configuration.

A WrapperConfig is immutable for the duration of one generation run. It can
be built directly, or loaded from a YAML file with command line values
layered on top:

    clocks: [clk]
    resets: [rst_n]
    groups: [axi, irq]
    interface: Top

List options from the command line extend the file's lists; scalar options
from the command line replace the file's values.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ._internal.io.yaml import expand_env_vars, load_yaml
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

_LIST_FIELDS = ("clocks", "resets", "params", "groups")


class WrapperConfig(BaseModel):
    """Options that drive generation of one BVI wrapper."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    clocks: List[str] = Field(default_factory=list)
    resets: List[str] = Field(default_factory=list)
    # Accepted for compatibility; generation does not use parameters yet.
    params: List[str] = Field(default_factory=list)
    groups: List[str] = Field(default_factory=list)
    interface_name: str = Field(alias="interface", min_length=1)

    @field_validator("clocks", "resets", "params", "groups")
    @classmethod
    def _no_empty_names(cls, values: List[str]) -> List[str]:
        for value in values:
            if not value:
                raise ValueError("names must be non-empty strings")
        return values

    @property
    def sorted_groups(self) -> List[str]:
        """Distinct group prefixes in lexicographic order."""
        return sorted(set(self.groups))


def load_config(
    config_file: Optional[Path] = None,
    clocks: Sequence[str] = (),
    resets: Sequence[str] = (),
    params: Sequence[str] = (),
    groups: Sequence[str] = (),
    interface: Optional[str] = None,
) -> WrapperConfig:
    """Build a WrapperConfig from an optional YAML file and CLI values.

    Raises:
        ConfigurationError: If the file cannot be read or the result is invalid
    """
    data: Dict[str, Any] = {}
    if config_file is not None:
        try:
            data = expand_env_vars(load_yaml(config_file))
        except FileNotFoundError as e:
            raise ConfigurationError(str(e)) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {config_file} must contain a mapping")
        logger.debug(f"Loaded config file {config_file}: {data}")

    cli_lists = {"clocks": clocks, "resets": resets, "params": params, "groups": groups}
    for key in _LIST_FIELDS:
        file_values = data.get(key) or []
        if isinstance(file_values, str):
            file_values = [file_values]
        if not isinstance(file_values, list):
            raise ConfigurationError(f"'{key}' in config file must be a list of names")
        data[key] = list(file_values) + list(cli_lists[key])

    if "interface_name" in data:
        data.setdefault("interface", data.pop("interface_name"))
    if interface is not None:
        data["interface"] = interface

    try:
        config = WrapperConfig(**data)
    except ValidationError as e:
        details = [
            f"{' → '.join(str(x) for x in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
        raise ConfigurationError("Configuration validation failed", details=details) from e

    if config.params:
        logger.debug(f"Parameters {config.params} are accepted but not used by generation")
    return config
