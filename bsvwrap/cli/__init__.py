# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""bsvwrap command-line interface.

Two commands share one generation pipeline:

1. bsv - run as a command over selected modules
   Usage: bsvwrap bsv design.json [MODULE...] -c clk -r rst -g foo -i Top [-o out.bsv]

2. write-bsv - run as a backend over every module
   Usage: bsvwrap write-bsv design.json out.bsv -c clk -r rst -g foo -i Top

Entry point defined in setup.py.
"""

from .cli import create_cli, main

__all__ = [
    "create_cli",
    "main",
]
