import json
import sys
from typing import Optional
import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape
from pydantic import ValidationError
from scimprep.config import settings
from scimprep.exceptions import SCIMException
from scimprep.schemas import PatchRequest
from scimprep.services import build_default_registry, prepare

console = Console()


def _load_json(file) -> object:
    try:
        return json.load(file)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"{file.name} is not valid JSON: {e}")


@click.group()
@click.version_option(version="0.1.0", prog_name="scimprep")
def cli():
    """scimprep - SCIM 2.0 response preparation CLI

    Applies the SCIM attribute return rules to resources and serves the
    discovery endpoints.
    """
    pass


@cli.command()
@click.argument("resource_file", type=click.File("r"))
@click.option("--resource-type", "-t", default="User", show_default=True, help="Resource type of the resource")
@click.option("--attributes", "-a", help="Comma separated attributes to return")
@click.option("--excluded-attributes", "-x", help="Comma separated attributes to exclude")
@click.option("--request", "-r", "request_file", type=click.File("r"), help="Create/replace request body, or a JSON list of patch operations")
@click.option("--base-url", "-b", help="Base URL used for meta.location")
def trim(
    resource_file,
    resource_type: str,
    attributes: Optional[str],
    excluded_attributes: Optional[str],
    request_file,
    base_url: Optional[str],
):
    """Trim a resource the way it would be returned to a client"""
    registry = build_default_registry()
    resource = _load_json(resource_file)
    if not isinstance(resource, dict):
        raise click.BadParameter("the resource must be a JSON object", param_hint="RESOURCE_FILE")

    try:
        definition = registry.get(resource_type)
        base_uri = None
        if base_url:
            base_uri = f"{base_url.rstrip('/')}{definition.endpoint}"
        preparer = prepare(definition, attributes, excluded_attributes, base_uri)

        if request_file is None:
            result = preparer.trim_retrieved(resource)
        else:
            request_body = _load_json(request_file)
            if isinstance(request_body, list):
                result = preparer.trim_modified(resource, request_body)
            elif isinstance(request_body, dict) and "Operations" in request_body:
                patch_request = PatchRequest.model_validate(request_body)
                result = preparer.trim_modified(resource, patch_request.Operations)
            elif isinstance(request_body, dict):
                result = preparer.trim_replaced(resource, request_body)
            else:
                raise click.BadParameter("the request must be a JSON object or list", param_hint="--request")
    except SCIMException as e:
        console.print(f"[red]✗ {escape(str(e.detail))}[/red]")
        sys.exit(1)
    except ValidationError as e:
        console.print(f"[red]✗ Invalid patch operation: {escape(str(e))}[/red]")
        sys.exit(1)

    click.echo(json.dumps(result, indent=2))


@cli.command("resource-types")
def resource_types():
    """List the registered resource types"""
    registry = build_default_registry()

    table = Table(title="Resource Types")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Endpoint", style="green", no_wrap=True)
    table.add_column("Schema")
    table.add_column("Extensions", style="dim")
    table.add_column("Attributes", justify="right")
    table.add_column("Discoverable")

    for definition in registry.get_resource_type_definitions():
        table.add_row(
            definition.name,
            definition.endpoint,
            definition.core_schema.id if definition.core_schema is not None else "-",
            "\n".join(
                f"{extension.schema.id}{' (required)' if extension.required else ''}"
                for extension in definition.schema_extensions
            ) or "-",
            str(len(definition.attributes)),
            "✓" if definition.discoverable else "✗",
        )

    console.print(table)


@cli.group()
def run():
    """Run the SCIM server"""
    pass


@run.command()
@click.option('--host', '-h', default=settings.host, help='Host to bind to')
@click.option('--port', '-p', default=settings.port, type=int, help='Port to bind to')
@click.option('--reload/--no-reload', default=settings.reload, help='Enable auto-reload')
def dev(host: str, port: int, reload: bool):
    """Run server in development mode"""
    console.print(Panel.fit(
        f"[bold green]Starting scimprep Development Server[/bold green]\n\n"
        f"[yellow]Host:[/yellow] {host}:{port}\n"
        f"[yellow]Docs:[/yellow] http://localhost:{port}/docs\n"
        f"[yellow]API:[/yellow]  http://localhost:{port}{settings.api_prefix}\n\n"
        f"[dim]Press CTRL+C to stop[/dim]",
        title="scimprep Dev Server"
    ))

    import uvicorn
    uvicorn.run(
        "scimprep.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True
    )


if __name__ == '__main__':
    cli()
