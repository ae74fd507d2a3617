from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace

from pydantic import BaseModel

from src.addressbook.runtime.config.config_data import ConfigData
from src.addressbook.runtime.config.config_template import load_config
from src.addressbook.runtime.settings import EnvironmentSettings


@dataclass
class AppContext:
    """Application context containing configuration and other app-wide state."""

    config: ConfigData


# Global configuration instance
_default_config = load_config(EnvironmentSettings().config_file)
_default_context = AppContext(config=_default_config)


# Context variable for application context
_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=_default_context
)


def get_context() -> AppContext:
    """Get the current application context.

    Returns:
        AppContext: The current application context containing configuration.
    """
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    """Set the current application context.

    Args:
        context: AppContext instance to set as current.
    """
    return _app_context.set(context)


def _recursive_model_dump_exclude_unset(model: BaseModel) -> dict:
    """Dump only the explicitly set fields of a model, at every level.

    Setting ``override.logging.level`` yields ``{"logging": {"level": ...}}``
    and leaves the other logging fields to the enclosing context. A nested
    model that was assigned whole but has nothing set inside it is dumped
    in full.
    """
    result = {}
    explicitly_set_fields = model.model_fields_set

    for field_name in model.__class__.model_fields:
        field_value = getattr(model, field_name)

        if isinstance(field_value, BaseModel):
            nested = _recursive_model_dump_exclude_unset(field_value)
            if nested:
                result[field_name] = nested
            elif field_name in explicitly_set_fields:
                result[field_name] = field_value.model_dump()
        elif field_name in explicitly_set_fields:
            result[field_name] = field_value

    return result


def _recursive_dict_merge(base_dict: dict, override_dict: dict) -> dict:
    """Recursively merge two dictionaries from deepest levels up.

    Args:
        base_dict: The base dictionary to merge into
        override_dict: The override dictionary to merge from

    Returns:
        dict: The merged dictionary
    """
    result = base_dict.copy()

    for key, value in override_dict.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _recursive_dict_merge(result[key], value)
        else:
            result[key] = value

    return result


def _merge_configs(base_config: ConfigData, override_config: ConfigData) -> ConfigData:
    """Merge ``override_config`` into ``base_config``; overrides win.

    Args:
        base_config: The base ConfigData instance.
        override_config: The override ConfigData instance.
    Returns:
        ConfigData: The merged ConfigData instance.
    """
    base_dict = base_config.model_dump()
    override_dict = _recursive_model_dump_exclude_unset(override_config)
    merged_dict = _recursive_dict_merge(base_dict, override_dict)
    return ConfigData.model_validate(merged_dict)


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Context manager for temporarily overriding the application context.

    Only fields explicitly set on ``config_override`` replace the current
    values; everything else is inherited from the enclosing context.

    Example:
        override = ConfigData()
        override.logging.level = "DEBUG"
        with with_context(override):
            assert get_config().logging.level == "DEBUG"
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    merged_config = _merge_configs(get_context().config, config_override)
    token = set_context(replace(get_context(), config=merged_config))
    try:
        yield
    finally:
        _app_context.reset(token)


def get_config() -> ConfigData:
    """Convenience function to get the current configuration.

    Returns:
        ConfigData: The current configuration from the app context.
    """
    return get_context().config
