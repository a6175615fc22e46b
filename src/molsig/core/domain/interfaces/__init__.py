"""Domain interfaces."""

from .result_sink import BondObserver, ResultSink

__all__ = ["BondObserver", "ResultSink"]
