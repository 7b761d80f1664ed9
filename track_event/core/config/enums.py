"""Configuration enums for type-safe settings.

These enums inherit from str so values read from the environment
compare equal to their plain string form.
"""

from enum import Enum


class SinkErrorPolicy(str, Enum):
    """What the wrapper does when the tracking sink itself raises.

    RAISE lets the sink error reach the caller after a successful method.
    After a failed method the original failure always wins and the sink
    error is logged. LOG never lets a sink error reach the caller.
    """

    RAISE = "raise"
    LOG = "log"
