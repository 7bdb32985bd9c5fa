"""
progress-stream command line.

    progress-stream serve                 run the SSE API with uvicorn
    progress-stream watch [URL]           stream progress from URL (or the saved endpoint)
    progress-stream endpoint [URL]        show or change the saved endpoint
"""

import asyncio
import sys

import click
import uvicorn
from rich.console import Console

from progress_stream.client.console import StreamConsole
from progress_stream.client.errors import ConfigurationError
from progress_stream.client.renderer import RichRenderer
from progress_stream.client.state import StreamStatus
from progress_stream.client.store import EndpointStore, validate_endpoint
from progress_stream.config import settings


@click.group()
def main():
    """Incremental progress streaming over Server-Sent Events."""


@main.command()
@click.option("--host", default=None, help="Bind address (default from settings)")
@click.option("--port", default=None, type=int, help="Bind port (default from settings)")
def serve(host, port):
    """Run the progress stream API."""
    uvicorn.run(
        "progress_stream.main:app",
        host=host or settings.host,
        port=port or settings.port,
        log_level="debug" if settings.debug else "info",
    )


@main.command()
@click.argument("url", required=False)
def watch(url):
    """Stream progress from URL and render it as it arrives."""
    console = StreamConsole()
    renderer = RichRenderer(Console())
    console.display.add_listener(renderer)
    console.controller.add_listener(renderer)

    try:
        with renderer:
            status = asyncio.run(console.start(url))
    except KeyboardInterrupt:
        click.echo("Stream cancelled", err=True)
        sys.exit(130)

    sys.exit(0 if status == StreamStatus.COMPLETE else 1)


@main.command()
@click.argument("url", required=False)
def endpoint(url):
    """Show the saved endpoint, or validate and save URL."""
    store = EndpointStore(settings.client_store_path)
    if url is None:
        click.echo(store.load_endpoint() or "(no endpoint saved)")
        return

    try:
        url = validate_endpoint(url)
    except ConfigurationError as e:
        raise click.BadParameter(e.detail, param_hint="URL")

    store.save_endpoint(url)
    click.echo(f"Saved endpoint: {url}")


if __name__ == "__main__":
    main()
