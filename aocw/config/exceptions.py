# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Exceptions raised while loading an aocw config file.

The CLI catches ConfigError as a whole and turns it into CONFIG_ERROR, so
nothing outside this package needs to know which step failed.
"""


class ConfigError(Exception):
    """Base for all configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when a config file cannot be read from disk or parsed as YAML."""


class ConfigValidationError(ConfigError):
    """
    Raised when a config file parses fine but fails schema validation:
    unknown keys, wrong types, or values out of range.
    """
