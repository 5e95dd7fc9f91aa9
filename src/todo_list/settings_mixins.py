"""Settings mixins for the task store and the presentation layer.

StoreSettingsMixin: Capacity and ordering policy of the task store.
UISettingsMixin: Input bounds, refresh cadence, and logging.

These modules live outside ui/ so that config.py can compose TodoSettings
without importing the ui package.
"""

from typing import Literal

from pydantic import Field

from todo_list.constants import (
    DEFAULT_CAPACITY,
    DEFAULT_PRIORITY_MAX,
    DEFAULT_PRIORITY_MIN,
    DEFAULT_REFRESH_INTERVAL,
)
from todo_list.tasks.ordering import OrderingPolicy


class StoreSettingsMixin:
    """Settings for the task store.

    Should be composed with TodoSettings via multiple inheritance.
    """

    capacity: int = Field(
        default=DEFAULT_CAPACITY,
        gt=0,
        title="Capacity",
        description="Maximum number of tasks the list can hold",
    )
    ordering_policy: OrderingPolicy = Field(
        default=OrderingPolicy.INSERTION_SORT,
        title="Ordering Policy",
        description="How tasks are ordered: insertion_sort, append_then_sort, or unordered",
    )


class UISettingsMixin:
    """Settings for the presentation layer.

    Mixin class that provides input validation bounds, the refresh
    interval, and logging configuration.

    Note: This is a mixin, not a BaseSettings subclass, to avoid
    MRO issues when composed with other settings classes.
    """

    # Priority entry
    priority_min: int = Field(
        default=DEFAULT_PRIORITY_MIN,
        title="Minimum Priority",
        description="Lowest priority a user may enter",
    )
    priority_max: int = Field(
        default=DEFAULT_PRIORITY_MAX,
        title="Maximum Priority",
        description="Highest priority a user may enter",
    )
    require_priority: bool = Field(
        default=True,
        title="Require Priority",
        description="Reject new tasks entered without a priority",
    )

    # Periodic refresh
    refresh_interval: float = Field(
        default=DEFAULT_REFRESH_INTERVAL,
        gt=0,
        title="Refresh Interval",
        description="Seconds between background refreshes of the task list",
    )

    # Logging configuration
    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        title="Log Level",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        title="Log Format",
        description="Log output format (console for dev, json for production)",
    )
