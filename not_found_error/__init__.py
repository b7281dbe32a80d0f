"""not_found_error: turn ``None`` into a typed "not found" error.

Main components:
* `NotFoundError`: payload-less error indexed by the missing kind
* `Result`: success/failure container returned by every conversion
* `require` / `not_found`: Optional -> Result conversions
* `locate`: first match in an iterable, or a not-found error
* `opt`: method-style `.require()` / `.ok_or_not_found()` wrapper
"""

# Version info
__version__ = "0.1.0"

# Core components
from not_found_error.core.error import NotFoundError, ErrorDetail
from not_found_error.core.result import Result
from not_found_error.core.convert import require, not_found
from not_found_error.core.search import locate

# Extension protocols and wrapper
from not_found_error.ext import Require, OkOrNotFound, Opt, opt

# Export all important symbols
__all__ = [
    # Core classes
    "NotFoundError",
    "ErrorDetail",
    "Result",

    # Functions
    "require",
    "not_found",
    "locate",

    # Method-style API
    "Require",
    "OkOrNotFound",
    "Opt",
    "opt",
]
