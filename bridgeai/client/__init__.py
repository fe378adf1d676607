"""Dispatcher layer: the client callers construct and talk to."""

from .commands import ChatCommand, Command
from .config import BridgeConfig, ResponseObserver, RetryOptions
from .dispatcher import BridgeAIClient

__all__ = [
    "BridgeAIClient",
    "BridgeConfig",
    "RetryOptions",
    "ResponseObserver",
    "Command",
    "ChatCommand",
]
