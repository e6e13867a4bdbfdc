"""
core.bfhl.dispatcher — Route a /bfhl body to its operation.

Maps each recognised key to a handler. Every handler receives
(value, text_generator) and returns the ``data`` for the success envelope,
or raises ValidationError.
"""
from __future__ import annotations

from typing import Any, Callable

from core.bfhl.operations import fibonacci, filter_primes, lcm_of, hcf_of
from core.bfhl.validation import (
    ValidationError,
    require_single_key,
    require_non_negative_int,
    require_int_list,
    require_str,
)

UNAVAILABLE = 'Unavailable'

Handler = Callable[[Any, Any], Any]


def _fibonacci(value, _generator):
    return fibonacci(require_non_negative_int(value, 'Invalid fibonacci input'))


def _prime(value, _generator):
    return filter_primes(require_int_list(value, 'Invalid prime input'))


def _lcm(value, _generator):
    return lcm_of(require_int_list(value, 'Invalid lcm input', non_empty=True))


def _hcf(value, _generator):
    return hcf_of(require_int_list(value, 'Invalid hcf input', non_empty=True))


def _ai(value, generator):
    prompt = require_str(value, 'Invalid AI input')
    return first_token(generator.generate(prompt)) or UNAVAILABLE


def first_token(text: str | None) -> str | None:
    """First whitespace-delimited word of ``text``, or None if there is none."""
    if not text:
        return None
    words = text.split()
    return words[0] if words else None


# Registry: request key -> handler
_HANDLERS: dict[str, Handler] = {
    'fibonacci': _fibonacci,
    'prime': _prime,
    'lcm': _lcm,
    'hcf': _hcf,
    'AI': _ai,
}


def get_handler(key: str) -> Handler | None:
    return _HANDLERS.get(key)


def dispatch(body: Any, text_generator: Any) -> Any:
    """Validate ``body`` and run the operation its single key names.

    Returns the operation result. Raises ValidationError for bad input;
    any other exception (e.g. a network error from the generator) is left
    for the caller.
    """
    key, value = require_single_key(body)
    handler = get_handler(key)
    if handler is None:
        raise ValidationError('Invalid key')
    return handler(value, text_generator)
