"""funcore: a small functional core for Python.

Public API:
    - Result: Success / Failure with fold, map, get_or_else, get_or_throw
    - Monoid: identity + combine witnesses, collapse()
    - Functor: per-shape witnesses (RESULT_FUNCTOR, TUPLE_FUNCTOR), fmap()
    - Ordering: greatest(), greatest_orderable(), greatest_adapted()
    - Laws: check_monoid_laws(), check_functor_laws()
"""

from __future__ import annotations

import logging

from funcore.config import Config
from funcore.errors import (
    ConfigurationError,
    EmptySequenceError,
    FuncoreError,
    LawViolation,
    UnwrapOnFailureError,
    ValidationFailure,
)
from funcore.functor import (
    RESULT_FUNCTOR,
    TUPLE_FUNCTOR,
    Functor,
    ResultFunctor,
    TupleFunctor,
    fmap,
)
from funcore.laws import check_functor_laws, check_monoid_laws
from funcore.monoid import (
    ALL,
    ANY,
    PRODUCT,
    STRING_CONCAT,
    SUM,
    Monoid,
    collapse,
    collapser,
    tuple_concat,
)
from funcore.order import Orderable, greatest, greatest_adapted, greatest_orderable
from funcore.result import Failure, Result, Success, failure, success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("funcore")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("funcore").addHandler(logging.NullHandler())

__all__ = [
    "ALL",
    "ANY",
    "PRODUCT",
    "RESULT_FUNCTOR",
    "STRING_CONCAT",
    "SUM",
    "TUPLE_FUNCTOR",
    "Config",
    "ConfigurationError",
    "EmptySequenceError",
    "Failure",
    "FuncoreError",
    "Functor",
    "LawViolation",
    "Monoid",
    "Orderable",
    "Result",
    "ResultFunctor",
    "Success",
    "TupleFunctor",
    "UnwrapOnFailureError",
    "ValidationFailure",
    "check_functor_laws",
    "check_monoid_laws",
    "collapse",
    "collapser",
    "failure",
    "fmap",
    "greatest",
    "greatest_adapted",
    "greatest_orderable",
    "success",
    "tuple_concat",
]
