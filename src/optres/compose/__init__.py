"""Composition utilities: free-function forms of the combinators."""

from optres.compose.functions import (
    option_and_then,
    option_and_then_async,
    option_map,
    option_map_async,
    option_or_else,
    option_or_else_async,
    result_and_then,
    result_and_then_async,
    result_map,
    result_map_async,
    result_map_err,
    result_or_else,
    result_or_else_async,
)

__all__ = [
    'option_and_then',
    'option_and_then_async',
    'option_map',
    'option_map_async',
    'option_or_else',
    'option_or_else_async',
    'result_and_then',
    'result_and_then_async',
    'result_map',
    'result_map_async',
    'result_map_err',
    'result_or_else',
    'result_or_else_async',
]
