import click
import json
import yaml

from rosvoid.config import load_config, get_config_path


@click.group("config")
def config_cmd():
    """Configuration management commands."""
    pass


@config_cmd.command("show")
@click.option("--json", "as_json", is_flag=True, help="Display as JSON instead of YAML")
@click.option("--path", is_flag=True, help="Show the config file path being used")
def show_config(as_json, path):
    """Show the current configuration with all merges applied.

    By default, outputs YAML.
    Use --path to see which config file is being used.
    """
    if path:
        click.echo(json.dumps({"config_path": str(get_config_path())}))
        return

    config = load_config()

    if as_json:
        click.echo(json.dumps(config, ensure_ascii=False))
    else:
        click.echo(yaml.safe_dump(config, default_flow_style=False, sort_keys=False), nl=False)
