"""optres: Option and Result types with combinators for Python 3.13+.

Flat imports (preferred):
    from optres import Option, Some, Nothing, Result, Ok, Err
    from optres import wrap, wrap_async, safe, all_results, try_all_results

Submodule imports (for organization):
    from optres.option import Some, Nothing, option_from
    from optres.result import Ok, Err, CombinedResult
    from optres.async_ import OptionPromise, ResultPromise
    from optres.compose import option_map, result_and_then
"""

# Configuration and logging
from optres._config import Config, LogFormat, get_config, init, reset
from optres._logging import add_log_hook, clear_log_hooks, configure_logging, get_logger, remove_log_hook

# Async
from optres.async_ import (
    OptionPromise,
    ResultPromise,
    is_option_promise,
    is_result_promise,
)

# Aggregation
from optres.combine import (
    all_options,
    all_results,
    any_options,
    any_results,
    transpose_option,
    transpose_result,
    try_all_results,
)

# Decorators
from optres.decorators import safe, safe_async

# Errors
from optres.errors import (
    ErrorAggregate,
    OptionUnwrapError,
    ResultUnwrapError,
    is_error_aggregate,
)

# Option types
from optres.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    is_option,
    none,
    option_from,
    some,
)

# Result types
from optres.result import (
    CombinedResult,
    Err,
    Ok,
    Result,
    err,
    is_result,
    ok,
)

# Capture boundary
from optres.wrap import wrap, wrap_async

__all__ = [
    'CombinedResult',
    'Config',
    'Err',
    'ErrorAggregate',
    'LogFormat',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'OptionPromise',
    'OptionUnwrapError',
    'Result',
    'ResultPromise',
    'ResultUnwrapError',
    'Some',
    'add_log_hook',
    'all_options',
    'all_results',
    'any_options',
    'any_results',
    'clear_log_hooks',
    'configure_logging',
    'err',
    'get_config',
    'get_logger',
    'init',
    'is_error_aggregate',
    'is_option',
    'is_option_promise',
    'is_result',
    'is_result_promise',
    'none',
    'ok',
    'option_from',
    'remove_log_hook',
    'reset',
    'safe',
    'safe_async',
    'some',
    'transpose_option',
    'transpose_result',
    'try_all_results',
    'wrap',
    'wrap_async',
]
