"""Init command implementation"""

import json
from datetime import datetime

import click
from rich.console import Console

from ..util import INSTANCE_FLAG_FILE, get_instance_path, is_initialized

console = Console()

CONFIG_TEMPLATE = """# Lynk instance configuration
# Environment variables (LYNK_*) override values in this file.

# Server
server_host = "0.0.0.0"
server_port = 8080
cors_origins = ["*"]

# Store: "redis" or "memory"
store_backend = "redis"
redis_url = "redis://127.0.0.1:6379"

# Channels
channel_ttl_seconds = 900
max_channel_bytes = 104857600
max_request_bytes = 209715200
password_protection = false

# Logging
log_level = "INFO"
log_dir = "{log_dir}"
"""


@click.command(name="init", help="Initialize a new Lynk instance")
@click.argument(
    "path",
    type=click.Path(),
    required=False,
)
def init(path: str = None):
    """Initialize a new Lynk instance

    Args:
        path: Instance directory path (default: ~/.lynk)
    """
    instance_path = get_instance_path(path)

    if is_initialized(instance_path):
        console.print(
            f"[red]Error: Already initialized at {instance_path}[/red]"
        )
        raise click.Abort()

    if instance_path.exists() and any(instance_path.iterdir()):
        console.print(
            f"[red]Error: Directory is not empty: {instance_path}[/red]"
        )
        raise click.Abort()

    # 1. Create directory structure
    console.print(f"Initializing Lynk instance at {instance_path}")
    console.print("")

    instance_path.mkdir(parents=True, exist_ok=True)
    logs_dir = instance_path / "logs"
    logs_dir.mkdir(exist_ok=True)

    # 2. Generate config.toml with default settings
    console.print("Generating configuration...")
    config_file = instance_path / "config.toml"
    config_file.write_text(CONFIG_TEMPLATE.format(log_dir=logs_dir.as_posix()))

    # 3. Create instance flag file
    flag_data = {
        "initialized_at": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "instance_path": str(instance_path),
    }
    with open(instance_path / INSTANCE_FLAG_FILE, "w") as f:
        json.dump(flag_data, f, indent=2)

    # 4. Display success message
    console.print("")
    console.print("[green]Lynk instance initialized successfully![/green]")
    console.print("")
    console.print(f"Location: {instance_path}")
    console.print("")
    console.print("Next steps:")
    console.print("  1. (Optional) Edit configuration:")
    console.print(f"     {config_file}")
    console.print("")
    console.print("  2. Start the server:")
    if path:
        console.print(f"     lynk start {path}")
    else:
        console.print("     lynk start")
