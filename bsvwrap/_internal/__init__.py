# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Internal utilities for bsvwrap.

This package contains private implementation details that are not part of
the public API and may change without notice.

Subpackages:
- io: config file loading

Modules:
- logging: Logging configuration
"""
