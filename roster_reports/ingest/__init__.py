"""Roster input decoding."""

from .roster_reader import RosterReader, read_roster

__all__ = ["RosterReader", "read_roster"]
