"""Executable commands."""

from .add_command import AddCommand
from .base import Command, CommandResult

__all__ = ["AddCommand", "Command", "CommandResult"]
