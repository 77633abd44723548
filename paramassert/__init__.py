"""paramassert — structural assertions for API call parameters.

    from paramassert import assert_value

    assert_value({"id": 7, "tags": ["a"]}, {"id": "s:n", "tags": ["s"]})  # True
"""

from paramassert.config import Settings, get_settings
from paramassert.log import configure_logging
from paramassert.validators import *  # noqa: F401,F403
from paramassert.validators import __all__ as _validators_all

__version__ = "1.0.0"

__all__ = ["Settings", "get_settings", "configure_logging", *_validators_all]
