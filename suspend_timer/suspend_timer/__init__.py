"""
suspend_timer package.

Holds the process-wide helpers of the tray application; the timer logic
and widgets live in the ``core`` package.
"""

__all__ = [
    "logger",
]
