"""Phonebook contact service."""

__version__ = "0.1.0"
