"""config command: show/set/unset project configuration."""

from __future__ import annotations

from ..config import CONFIG_SCHEMA, save_config, set_config_value, unset_config_value
from ..errors import ConfigError
from ..utils import colorize


def cmd_config(args):
    """Dispatch ``unsnarl config {show,set,unset}``; show is the default."""
    action = getattr(args, "config_action", None) or "show"
    handler = {"set": _config_set, "unset": _config_unset}.get(action, _config_show)
    handler(args._config, getattr(args, "config_key", None), getattr(args, "config_value", None))


def _describe(value) -> str:
    if isinstance(value, list):
        return ", ".join(value) if value else "(empty)"
    return str(value)


def _config_show(config: dict, _key=None, _value=None) -> None:
    print(colorize("\n  unsnarl configuration\n", "bold"))
    for name, entry in CONFIG_SCHEMA.items():
        current = config.get(name, entry.default)
        marker = "" if current != entry.default else colorize(" (default)", "dim")
        print(f"  {name:<25} {_describe(current)}{marker}")
        print(colorize(f"  {'':25} {entry.description}", "dim"))
    print()


def _config_set(config: dict, key: str, value: str) -> None:
    """Validate and store *value*; nothing is written when validation fails."""
    try:
        set_config_value(config, key, value)
    except (KeyError, ValueError) as exc:
        raise ConfigError(exc.args[0]) from exc
    save_config(config)
    print(colorize(f"  Set {key} = {_describe(config[key])}", "green"))


def _config_unset(config: dict, key: str, _value=None) -> None:
    try:
        unset_config_value(config, key)
    except KeyError as exc:
        raise ConfigError(exc.args[0]) from exc
    save_config(config)
    print(colorize(f"  Reset {key} to default ({_describe(CONFIG_SCHEMA[key].default)})", "green"))
