"""Start command implementation"""

import click
from pydantic import ValidationError
from rich.console import Console

from ..util import get_instance_path, is_initialized

console = Console()


@click.command(name="start", help="Start Lynk backend server")
@click.argument(
    "path",
    type=click.Path(),
    required=False,
)
@click.option("--host", default=None, help="Bind address (overrides config)")
@click.option("--port", default=None, type=int, help="Bind port (overrides config)")
def start(path: str = None, host: str = None, port: int = None):
    """Start Lynk backend server

    Args:
        path: Instance directory path (default: ~/.lynk)
        host: Bind address override
        port: Bind port override
    """
    instance_path = get_instance_path(path)

    if not is_initialized(instance_path):
        console.print(
            f"[red]Error: Not initialized at {instance_path}[/red]"
        )
        console.print(
            f"[yellow]Run: lynk init {path if path else ''}[/yellow]"
        )
        raise click.Abort()

    # Load configuration
    from lynk.backend.config import load_settings

    overrides = {}
    if host is not None:
        overrides["server_host"] = host
    if port is not None:
        overrides["server_port"] = port

    try:
        settings = load_settings(instance_path, **overrides)
    except ValidationError as e:
        console.print(f"[red]Error loading config: {e}[/red]")
        raise click.Abort()

    # Display startup info
    host = settings.server_host
    port = settings.server_port
    console.print(f"[cyan]Starting Lynk from {instance_path}[/cyan]")
    console.print(f"[cyan]Server: http://{host}:{port}[/cyan]")
    console.print(f"[cyan]Store: {settings.store_backend}[/cyan]")
    console.print(f"[cyan]Channel TTL: {settings.channel_ttl_seconds}s[/cyan]")
    console.print("")

    # Start server in foreground
    import uvicorn
    from lynk.backend.app import create_app

    app = create_app(settings)

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_config=None,
    )
