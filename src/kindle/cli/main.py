"""Main CLI implementation using Typer."""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from kindle.cli.config import load_config
from kindle.errors import IgnitionError
from kindle.ignition import ConfigAssembler, IgnitionBuilder, ignition_file_path
from kindle.models.request import ProvisioningRequest
from kindle.utils.dataurl import encode_data_url
from kindle.utils.logging import setup_logging


app = typer.Typer(
    name="kindle",
    help="Kindle - first-boot Ignition configs for container machines",
    add_completion=False,
)

console = Console()


@app.command("generate")
def generate_command(
    output: Path = typer.Option(..., "--output", "-o", help="Where to write the ignition file"),
    name: str = typer.Option("", "--name", "-n", help="Login name (default from config)"),
    key: str = typer.Option("", "--key", help="SSH public key"),
    key_file: Optional[Path] = typer.Option(None, "--key-file", help="Read the SSH public key from a file"),
    timezone: str = typer.Option("", "--timezone", help="'local' or an IANA zone name"),
    uid: int = typer.Option(1000, "--uid", help="Numeric id of the login user"),
    vm_name: str = typer.Option("", "--vm-name", help="Machine name"),
    vm_type: Optional[str] = typer.Option(None, "--vm-type", help="qemu, wsl, applehv, hyperv, libkrun"),
    rootful: bool = typer.Option(False, "--rootful", help="Point the docker socket at the rootful podman socket"),
    net_recover: bool = typer.Option(False, "--net-recover", help="Install the network health recovery service"),
    ignition_file: Optional[Path] = typer.Option(
        None, "--ignition-file", help="Copy this ignition file instead of generating one"
    ),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML configuration file"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override the configured log level"),
):
    """Assemble and write the ignition file for a new machine."""
    try:
        config = load_config(config_path)
        setup_logging(log_level or config.log_level)

        if key_file is not None:
            key = key_file.read_text().strip()

        request = ProvisioningRequest(
            name=name or config.default_user,
            key=key,
            time_zone=timezone,
            uid=uid,
            vm_name=vm_name,
            vm_type=vm_type or config.vm_type,
            write_path=str(output),
            rootful=rootful,
            net_recover=net_recover,
        )
        builder = IgnitionBuilder(
            request,
            ConfigAssembler(certs_target_path=config.certs_target_path),
        )

        if ignition_file is not None:
            path = builder.build_with_ignition_file(ignition_file)
        else:
            result = builder.generate()
            for warning in result.warnings:
                console.print(f"[yellow]Warning:[/yellow] {warning}")
            path = builder.build()
    except (IgnitionError, ValidationError, OSError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    console.print(f"[green]Wrote[/green] {path}")


@app.command("encode")
def encode_command(text: str = typer.Argument(..., help="Text to embed")):
    """Print TEXT as an inline data URL."""
    typer.echo(encode_data_url(text))


@app.command("path")
def path_command(
    vm_config_dir: Path = typer.Argument(..., help="Machine config directory"),
    vm_name: str = typer.Argument(..., help="Machine name"),
):
    """Print where a machine's ignition file lives."""
    typer.echo(str(ignition_file_path(vm_config_dir, vm_name)))


def main():
    """Main entry point for CLI."""
    app()
