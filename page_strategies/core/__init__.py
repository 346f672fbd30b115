"""Core module pour page_strategies."""
from .descriptor import PageDescriptor, Props
from .durations import parse_duration
from .props import PropsCodec

__all__ = [
    "PageDescriptor",
    "Props",
    "parse_duration",
    "PropsCodec",
]
