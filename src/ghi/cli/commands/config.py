import click

from ghi.cli.output import machine_output, user_output
from ghi.core.config_store import CONFIG_KEYS, GlobalConfig, parse_boolean_value
from ghi.core.context import GhiContext


def _format_value(config: GlobalConfig, key: str) -> str:
    match key:
        case "host":
            return config.host
        case "prompts_enabled":
            return str(config.prompts_enabled).lower()
        case _:
            user_output(f"Invalid key: {key}")
            raise SystemExit(1)


def _update_config_field(
    current_config: GlobalConfig, field_name: str, value: str
) -> GlobalConfig:
    """Return a copy of current_config with one field replaced.

    Raises:
        SystemExit: If the field name or value is invalid
    """
    match field_name:
        case "host":
            if not value.strip():
                user_output("Invalid value for host: must not be empty")
                raise SystemExit(1)
            return GlobalConfig(
                host=value.strip().lower(),
                prompts_enabled=current_config.prompts_enabled,
            )
        case "prompts_enabled":
            try:
                prompts_enabled = parse_boolean_value(value, field_name)
            except ValueError as e:
                user_output(str(e))
                raise SystemExit(1) from e
            return GlobalConfig(
                host=current_config.host,
                prompts_enabled=prompts_enabled,
            )
        case _:
            user_output(f"Invalid key: {field_name}")
            raise SystemExit(1)


@click.group("config")
def config_group() -> None:
    """Manage ghi configuration."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: GhiContext) -> None:
    """Print a list of configuration keys and values."""
    user_output(click.style("Global configuration:", bold=True))
    if not ctx.config_store.exists():
        user_output(f"  (defaults - no file at {ctx.config_store.path()})")
    for key in CONFIG_KEYS:
        machine_output(f"{key}={_format_value(ctx.config, key)}")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
def config_get(ctx: GhiContext, key: str) -> None:
    """Print the value of a given configuration key."""
    machine_output(_format_value(ctx.config, key))


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
def config_set(ctx: GhiContext, key: str, value: str) -> None:
    """Update configuration with a value for the given key."""
    new_config = _update_config_field(ctx.config, key, value)
    ctx.config_store.save(new_config)
    user_output(f"Set {key}={_format_value(new_config, key)}")
