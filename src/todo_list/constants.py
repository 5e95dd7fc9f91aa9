"""Shared constants for todo-list."""

# Store limits
DEFAULT_CAPACITY = 100

# Presentation defaults
DEFAULT_PRIORITY_MIN = 1
DEFAULT_PRIORITY_MAX = 5
DEFAULT_REFRESH_INTERVAL = 5.0

# Rendering
PRIORITY_TEMPLATE = " (Priority: {priority})"
COMPLETED_SUFFIX = " (Completed)"
