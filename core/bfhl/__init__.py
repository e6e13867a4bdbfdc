"""
core.bfhl — Single-key request dispatch for the /bfhl endpoint.

Public API:
    dispatch                 — validate a request body and run its operation
    get_handler              — look up the handler for a request key
    first_token              — first whitespace-delimited word of a reply
    UNAVAILABLE              — AI result when no reply text is available
    ValidationError          — raised for any client input problem
    fibonacci, filter_primes — sequence operations
    lcm_of, hcf_of           — fold operations
    gcd, lcm, is_prime       — pairwise helpers
"""

from core.bfhl.dispatcher import dispatch, get_handler, first_token, UNAVAILABLE
from core.bfhl.operations import (
    fibonacci,
    is_prime,
    filter_primes,
    gcd,
    lcm,
    lcm_of,
    hcf_of,
)
from core.bfhl.validation import ValidationError

__all__ = [
    'dispatch',
    'get_handler',
    'first_token',
    'UNAVAILABLE',
    'fibonacci',
    'is_prime',
    'filter_primes',
    'gcd',
    'lcm',
    'lcm_of',
    'hcf_of',
    'ValidationError',
]
