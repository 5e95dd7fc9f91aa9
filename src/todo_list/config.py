"""Configuration for the to-do list application.

Provides the TodoSettings class holding store limits, the ordering
policy, presentation bounds, and logging configuration.

Settings Management:
    The module provides both global singleton and context-based settings:

    1. Global singleton (simple cases):
        set_settings(my_settings)
        settings = get_settings()

    2. Context-based (isolated contexts, tests):
        with SettingsContext(my_settings):
            # Code here sees my_settings via get_settings()
            settings = get_settings()  # Returns my_settings

Settings Loading Priority (highest to lowest):
    1. Environment variables (TODO_* prefix)
    2. Project config (./.todo_list/settings.json)
    3. User config (~/.todo_list/settings.json)
    4. .env file
    5. Default values
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from pathlib import Path
from typing import Generator, Tuple, Type

from pydantic import Field
from pydantic_settings import (
    BaseSettings as PydanticBaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from todo_list.logging import Loggers
from todo_list.settings_mixins import StoreSettingsMixin, UISettingsMixin

__all__ = [
    "TodoSettings",
    "SettingsContext",
    "SettingsValidationError",
    "get_settings",
    "set_settings",
    "set_context_settings",
    "get_context_settings",
    "validate_settings",
    "reload_settings",
]

logger = Loggers.config()

# Shortest refresh interval that does not turn the refresher into a busy loop
MIN_REFRESH_INTERVAL = 0.1


def _get_json_config_source(
    settings_cls: Type[PydanticBaseSettings],
    json_file: Path,
) -> PydanticBaseSettingsSource | None:
    """Create a JSON config source if the file exists.

    Args:
        settings_cls: The settings class
        json_file: Path to JSON config file

    Returns:
        JsonConfigSettingsSource if file exists, None otherwise
    """
    if not json_file.exists():
        return None
    return JsonConfigSettingsSource(settings_cls, json_file=json_file)


class TodoSettings(StoreSettingsMixin, UISettingsMixin, PydanticBaseSettings):
    """Settings for the to-do list application.

    Settings are loaded from (in order of precedence):
    1. Constructor arguments
    2. Environment variables (TODO_ prefix)
    3. Project config (./.todo_list/settings.json)
    4. User config (~/.todo_list/settings.json)
    5. .env file
    6. Default values

    Mixins provide organized settings:
    - StoreSettingsMixin: Capacity and ordering policy
    - UISettingsMixin: Priority bounds, refresh interval, logging
    """

    model_config = SettingsConfigDict(
        env_prefix="TODO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(
        default="todo_list",
        title="App Name",
        description="Application name, also names the JSON config directory",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[PydanticBaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources for layered JSON configuration.

        Priority (highest to lowest):
            1. init_settings (constructor arguments)
            2. env_settings (environment variables)
            3. project_json (./.app_name/settings.json)
            4. user_json (~/.app_name/settings.json)
            5. dotenv_settings (.env file)

        Note: JSON sources are only included if the files exist.
        """
        sources: list[PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
        ]

        app_name = cls.model_fields["app_name"].default

        project_json = _get_json_config_source(
            settings_cls,
            Path.cwd() / f".{app_name}" / "settings.json",
        )
        if project_json:
            sources.append(project_json)

        user_json = _get_json_config_source(
            settings_cls,
            Path.home() / f".{app_name}" / "settings.json",
        )
        if user_json:
            sources.append(user_json)

        sources.append(dotenv_settings)

        return tuple(sources)

    @property
    def priority_range(self) -> range:
        """Priorities a user may enter, inclusive of both bounds."""
        return range(self.priority_min, self.priority_max + 1)


# Context variable for settings (takes precedence over global singleton)
_settings_context: ContextVar[TodoSettings | None] = ContextVar(
    "settings_context", default=None
)

# Global settings instance holder (fallback when no context)
_settings_instance: TodoSettings | None = None


def get_settings() -> TodoSettings:
    """Get the current settings instance.

    Settings resolution order:
    1. Context variable (set via SettingsContext or set_context_settings)
    2. Global singleton (set via set_settings)
    3. Fresh TodoSettings instance (created on first access)

    Returns:
        TodoSettings instance for the current context
    """
    context_settings = _settings_context.get()
    if context_settings is not None:
        return context_settings

    global _settings_instance
    if _settings_instance is None:
        _settings_instance = TodoSettings()
        logger.debug("settings_loaded", app_name=_settings_instance.app_name)
    return _settings_instance


def set_settings(settings: TodoSettings) -> None:
    """Set the global settings instance.

    Note: For isolated contexts (e.g., testing), prefer using
    SettingsContext instead.

    Args:
        settings: Settings instance to use globally
    """
    global _settings_instance
    _settings_instance = settings


def set_context_settings(settings: TodoSettings | None) -> Token:
    """Set settings for the current context.

    Args:
        settings: Settings to use in current context, or None to clear

    Returns:
        Token that can be used to reset the context variable.
    """
    return _settings_context.set(settings)


def get_context_settings() -> TodoSettings | None:
    """Get settings from current context (if any).

    Returns:
        Settings from current context, or None if not set
    """
    return _settings_context.get()


@contextmanager
def SettingsContext(settings: TodoSettings) -> Generator[TodoSettings, None, None]:
    """Context manager for isolated settings.

    Example:
        with SettingsContext(test_settings) as s:
            store = create_store()  # Uses test_settings

    Args:
        settings: Settings to use within the context

    Yields:
        The settings instance
    """
    token = _settings_context.set(settings)
    try:
        yield settings
    finally:
        _settings_context.reset(token)


def reload_settings() -> TodoSettings:
    """Reload settings (clears global singleton and context cache).

    Returns:
        Fresh TodoSettings instance
    """
    global _settings_instance
    _settings_instance = None
    _settings_context.set(None)
    return get_settings()


class SettingsValidationError(Exception):
    """Raised when settings validation fails."""

    pass


def validate_settings(settings: TodoSettings) -> None:
    """Validate settings for runtime use.

    Performs checks that span more than one field:
    - Priority bounds are ordered
    - Refresh interval is not so short it busy-loops

    Args:
        settings: Settings to validate

    Raises:
        SettingsValidationError: If validation fails
    """
    errors = []

    if settings.priority_min > settings.priority_max:
        errors.append(
            f"priority_min ({settings.priority_min}) is greater than "
            f"priority_max ({settings.priority_max})"
        )

    if settings.refresh_interval < MIN_REFRESH_INTERVAL:
        errors.append(
            f"refresh_interval must be at least {MIN_REFRESH_INTERVAL}s, "
            f"got {settings.refresh_interval}s"
        )

    if errors:
        raise SettingsValidationError("\n".join(errors))
