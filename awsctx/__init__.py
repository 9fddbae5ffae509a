# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#                              ᚨᚹᛊᚲᛏᚲ • AWSCTX
#                 Binding AWS Profiles and Regions to Contexts
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

__version__ = "0.3.0"

from awsctx.context import ContextCreateHelper, ContextParams, EcsContext
from awsctx.errors import (
    ContextError,
    NotFoundError,
    AlreadyExistsError,
    ValidationError,
    CanceledError,
    ConfigFileError,
    ConfigFileNotFoundError,
)

__all__ = [
    '__version__',
    'ContextCreateHelper',
    'ContextParams',
    'EcsContext',
    'ContextError',
    'NotFoundError',
    'AlreadyExistsError',
    'ValidationError',
    'CanceledError',
    'ConfigFileError',
    'ConfigFileNotFoundError',
]
