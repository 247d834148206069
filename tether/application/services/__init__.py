"""Application services for tether.

Application services provide reusable application logic on top of the
connection supervisor.
"""

from .exchange_correlator import ExchangeCorrelator

__all__ = [
    "ExchangeCorrelator",
]
