"""API facade and its HTTP and GUI command transports."""

from idleview.api.commands import CommandDispatcher, CommandResult
from idleview.api.facade import SERVICE_NAME, IdleviewAPI
from idleview.api.http import create_app

__all__ = [
    "SERVICE_NAME",
    "CommandDispatcher",
    "CommandResult",
    "IdleviewAPI",
    "create_app",
]
