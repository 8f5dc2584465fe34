"""Built-in project blueprints, one self-contained module per template."""

from .basic import TEMPLATE as BASIC
from .express import TEMPLATE as EXPRESS
from .typescript_basic import TEMPLATE as TYPESCRIPT_BASIC
from .typescript_express import TEMPLATE as TYPESCRIPT_EXPRESS

__all__ = [
    "BASIC",
    "EXPRESS",
    "TYPESCRIPT_BASIC",
    "TYPESCRIPT_EXPRESS",
]
