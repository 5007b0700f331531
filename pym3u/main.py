import asyncio
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from pym3u.dto.playlist import Catalog
from pym3u.errors import PlaylistError
from pym3u.services.catalog import CatalogService

logger = logging.getLogger(__name__)

REMOTE_PREFIXES = ("http://", "https://")


def configure_logging() -> None:
    logging.basicConfig(
        filename=os.getenv("PYM3U_LOG_FILE", "pym3u.log"),
        filemode="w",
        level=os.getenv("PYM3U_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def render_catalog(console: Console, catalog: Catalog) -> None:
    table = Table(title="Categories")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Icon", style="magenta")
    table.add_column("Channels", justify="right")
    for category in catalog.categories:
        table.add_row(category.id, category.name, category.icon, str(category.count))
    console.print(table)
    console.print(
        f"[bold]{catalog.playlist.metadata.total_channels}[/bold] channels loaded"
    )


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    configure_logging()

    args: List[str] = sys.argv[1:] if argv is None else argv
    source: str = (
        args[0]
        if args
        else os.getenv("PYM3U_PLAYLIST_URL", "")
        or os.getenv("PYM3U_PLAYLIST_FILE", "")
    )
    if not source:
        raise ValueError(
            "Pass a playlist URL or path, or set PYM3U_PLAYLIST_URL or PYM3U_PLAYLIST_FILE."
        )

    service = CatalogService(
        timeout=float(os.getenv("PYM3U_REQUEST_TIMEOUT", "30")),
        user_agent=os.getenv("PYM3U_USER_AGENT"),
    )
    console = Console()

    try:
        if source.lower().startswith(REMOTE_PREFIXES):
            catalog: Catalog = asyncio.run(service.load_from_url(source))
        else:
            catalog = asyncio.run(service.load_from_file(source))
    except PlaylistError as e:
        logger.error(f"Failed to load playlist from {source}: {e}")
        console.print(f"[red]{e}[/red]")
        return 1

    render_catalog(console, catalog)
    return 0


if __name__ == "__main__":
    sys.exit(main())
