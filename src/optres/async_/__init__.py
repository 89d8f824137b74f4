"""Deferred wrappers: OptionPromise and ResultPromise."""

from optres.async_.promise import (
    OptionPromise,
    ResultPromise,
    is_option_promise,
    is_result_promise,
)

__all__ = [
    'OptionPromise',
    'ResultPromise',
    'is_option_promise',
    'is_result_promise',
]
