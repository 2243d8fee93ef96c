"""Terminal rendering, layout, notification and host helpers for a hardware monitoring view."""

__version__ = "0.6.1"

__all__ = [
    "buffer",
    "chrome",
    "disk_filter",
    "help",
    "layout",
    "notification",
    "process_format",
    "system",
    "tabs",
    "text",
]