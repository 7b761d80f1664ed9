"""Adapters for objects the wrapper talks to."""
