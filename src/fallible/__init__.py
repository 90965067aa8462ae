"""fallible: Result and Option containers with a fluent combinator API.

Public API:
    - Result / Success / Failure, built with success() and failure()
    - Option / Present / Absent, built with present(), absent(), from_optional()
    - UnwrapFailure: raised only by unwrap()/expect() style accessors
    - Config / configure(): how unwrap diagnostics render payloads
"""

from __future__ import annotations

import logging

from fallible.config import Config, configure, get_config, reset_config
from fallible.errors import ConfigurationError, FallibleError, UnwrapFailure
from fallible.option import Absent, Option, Present, absent, from_optional, present
from fallible.result import Failure, Result, Success, failure, success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fallible")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fallible").addHandler(logging.NullHandler())

__all__ = [
    "Absent",
    "Config",
    "ConfigurationError",
    "FallibleError",
    "Failure",
    "Option",
    "Present",
    "Result",
    "Success",
    "UnwrapFailure",
    "absent",
    "configure",
    "failure",
    "from_optional",
    "get_config",
    "present",
    "reset_config",
    "success",
]
