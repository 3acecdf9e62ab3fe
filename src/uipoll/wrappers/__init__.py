"""Wrappers around system services the polling helpers depend on."""

from .time_wrapper import TimeWrapper

__all__ = ["TimeWrapper"]
