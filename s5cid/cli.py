"""CLI entry point for s5cid."""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, NoReturn

import typer
import yaml
from rich import print as rprint
from rich.syntax import Syntax
from rich.table import Table

from s5cid.cid import (
    CidInfo,
    convert_download_directory_input,
    decode_cid,
    describe_all,
    encode_cid,
    extract_digest_hex,
    extract_multihash,
    extract_size,
)
from s5cid.codec.multibase import Multibase
from s5cid.config import S5CidConfig, load_config
from s5cid.config.loader import DEFAULT_CONFIG_TEMPLATE
from s5cid.errors import CIDError
from s5cid.hashing import cid_from_file
from s5cid.log import configure_logging
from s5cid.url import add_subdomain, format_s5_uri

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="s5cid",
    help="Inspect, convert and compute S5 content identifiers.",
)

config_app = typer.Typer(help="Manage s5cid configuration.")
app.add_typer(config_app, name="config")


class OutputFormat(str, Enum):
    table = "table"
    json = "json"


# Global state
_config: S5CidConfig | None = None


def _get_config() -> S5CidConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to s5cid.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    configure_logging(_config.log_level, _config.log_format)


def _fail(e: Exception) -> NoReturn:
    rprint(f"[red]Error:[/red] {e}")
    raise typer.Exit(1)


def _display_info(info: CidInfo) -> None:
    table = Table(title="CID", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", overflow="fold")
    table.add_row("base58btc (z)", info.z_form)
    table.add_row("base64url (u)", info.u_form)
    table.add_row("base32 (b)", info.b_form)
    table.add_row("multihash (base64url)", info.base64url_multihash or "[dim]n/a[/dim]")
    table.add_row("blake3 (hex)", info.digest_hex or "[dim]n/a[/dim]")
    table.add_row("size", str(info.size))
    rprint(table)


@app.command()
def info(
    cid: str = typer.Argument(..., help="CID in z, u or b form"),
    format: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Output format: table or json")
    ] = OutputFormat.table,
) -> None:
    """Show every representation of a CID."""
    try:
        result = describe_all(cid)
    except CIDError as e:
        _fail(e)

    if format is OutputFormat.json:
        typer.echo(json.dumps(result.model_dump(), indent=2))
    else:
        _display_info(result)


@app.command("convert")
def convert_cmd(
    cid: str = typer.Argument(..., help="CID in z, u or b form"),
    to: Annotated[
        str, typer.Option("--to", "-t", help="Target prefix: z, u or b")
    ] = "b",
) -> None:
    """Re-encode a CID with another multibase prefix."""
    try:
        typer.echo(encode_cid(to, decode_cid(cid)))
    except CIDError as e:
        _fail(e)


@app.command()
def size(cid: str = typer.Argument(..., help="CID in z, u or b form")) -> None:
    """Print the declared content size."""
    try:
        typer.echo(extract_size(cid))
    except CIDError as e:
        _fail(e)


@app.command()
def digest(cid: str = typer.Argument(..., help="CID in z, u or b form")) -> None:
    """Print the BLAKE3 digest in hex."""
    try:
        typer.echo(extract_digest_hex(cid))
    except CIDError as e:
        _fail(e)


@app.command()
def multihash(cid: str = typer.Argument(..., help="CID in z, u or b form")) -> None:
    """Print the multihash in hex."""
    try:
        typer.echo(extract_multihash(cid).hex())
    except CIDError as e:
        _fail(e)


@app.command("hash")
def hash_cmd(
    file: Path = typer.Argument(..., help="File to hash"),
    prefix: Annotated[
        str | None, typer.Option("--prefix", "-p", help="Output prefix: z, u or b")
    ] = None,
    s5_uri: bool = typer.Option(False, "--s5", help="Print as an s5:// URI"),
) -> None:
    """Compute the raw CID of a local file."""
    cfg = _get_config()
    try:
        cid = cid_from_file(file, chunk_size=cfg.hash_chunk_size)
        text = encode_cid(prefix or cfg.default_prefix, cid.to_bytes(cfg.max_size_bytes))
    except (OSError, CIDError) as e:
        _fail(e)
    logger.debug("CID for %s: %s", file, text)
    typer.echo(format_s5_uri(text) if s5_uri else text)


@app.command("dir-input")
def dir_input(
    value: str = typer.Argument(..., help="CID or portal URL with a CID subdomain"),
) -> None:
    """Normalise a CID or subdomain URL into the base32 form used for directories."""
    try:
        typer.echo(convert_download_directory_input(value))
    except CIDError as e:
        _fail(e)


@app.command()
def url(cid: str = typer.Argument(..., help="CID in z, u or b form")) -> None:
    """Print the portal subdomain URL for a CID."""
    cfg = _get_config()
    try:
        b_form = encode_cid(Multibase.BASE32, decode_cid(cid))
    except CIDError as e:
        _fail(e)
    typer.echo(add_subdomain(cfg.portal_url, b_form))


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default s5cid.yaml in current directory."""
    target = Path("s5cid.yaml")
    if target.exists() and not force:
        rprint("[yellow]s5cid.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
