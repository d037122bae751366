from .fields import TOKENS
from .formatter import caller_label, render
from .instance import Logger
from .registry import LoggerRegistry
from .stack import get_caller_from_stack

__all__ = [
    "TOKENS",
    "Logger",
    "LoggerRegistry",
    "caller_label",
    "get_caller_from_stack",
    "render",
]
