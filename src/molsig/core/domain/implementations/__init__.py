"""Concrete implementations of domain interfaces."""

from .result_sinks import CallbackResultSink, ListResultSink, LoggingResultSink

__all__ = ["CallbackResultSink", "ListResultSink", "LoggingResultSink"]
