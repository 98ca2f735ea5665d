"""CLI for chat-sections (build and inspect sections of chat items)."""

import asyncio
import json
from pathlib import Path
from typing import Annotated, Any

import typer
from loguru import logger

from chat_sections.api import ChatApi
from chat_sections.core.importer.json_reader import parse_chat_items, parse_item_areas
from chat_sections.core.loader import load_bottom_section
from chat_sections.core.sections.builder import put_into_sections
from chat_sections.core.sections.query import drop_temporary_sections, revealed_item_count
from chat_sections.logging_config import configure_logging
from chat_sections.models.chat import ChatInfo
from chat_sections.models.section import Section
from chat_sections.session import ChatSession

app = typer.Typer(help="Chat sections: partition chat items into scroll areas and merge runs.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _read_json(path: Path) -> Any:
    if not path.exists():
        logger.error("File not found: {}", path)
        raise typer.Exit(1)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.error("Cannot parse {}: {}", path, e)
        raise typer.Exit(1) from None


def _sections_to_dict(sections: list[Section]) -> dict[str, Any]:
    return {
        "sections": [
            {
                "area": s.boundary.area.value,
                "min_index": s.boundary.min_index,
                "max_index": s.boundary.max_index,
                "runs": [
                    {
                        "merge_category": run.merge_category,
                        "item_ids": [i.id for i in run.items],
                        "revealed": run.revealed,
                        "show_avatar": sorted(run.show_avatar),
                    }
                    for run in s.items
                ],
                "positions": {str(k): v for k, v in s.item_positions.items()},
            }
            for s in sections
        ],
        "revealed_item_count": revealed_item_count(sections),
    }


def _echo_sections(sections: list[Section], *, output_json: bool) -> None:
    if output_json:
        typer.echo(json.dumps(_sections_to_dict(sections), indent=2))
        return

    typer.echo(f"{len(sections)} sections, {revealed_item_count(sections)} rows:\n")
    for s in sections:
        b = s.boundary
        typer.echo(f"  [{b.area.value}] items {b.min_index}..{b.max_index}")
        for run in s.items:
            ids = ", ".join(str(i.id) for i in run.items)
            state = "revealed" if run.revealed else "collapsed"
            category = run.merge_category or "-"
            typer.echo(f"    {category} ({state}): {ids}")
        typer.echo()


@app.command()
def sections(
    items_file: Path = typer.Argument(..., help="JSON list of chat items"),
    areas_file: Annotated[
        Path | None,
        typer.Option("--areas", "-a", help="JSON map of item id to area"),
    ] = None,
    reveal: Annotated[
        list[int] | None,
        typer.Option("--reveal", "-r", help="Item id whose merged run is expanded"),
    ] = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Build sections from a file of chat items."""
    try:
        items = parse_chat_items(_read_json(items_file))
        areas = parse_item_areas(_read_json(areas_file)) if areas_file else {}
    except ValueError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from None

    result = put_into_sections(items, set(reveal or ()), areas)
    _echo_sections(result, output_json=output_json)


@app.command(name="load-bottom")
def load_bottom(
    chat_id: str = typer.Argument(..., help="Chat id, e.g. '#12' or '@3'"),
    remote_host: Annotated[
        int | None,
        typer.Option("--remote-host", help="Remote host id to route the request through"),
    ] = None,
    api_url: Annotated[
        str | None,
        typer.Option("--api-url", help="Chat API base URL"),
    ] = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Load the latest page of a chat and show its sections."""
    try:
        chat_info = ChatInfo.from_id(chat_id)
    except ValueError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from None

    session = ChatSession(chat_id=chat_info.id)
    api = ChatApi(base_url=api_url)
    inserted = asyncio.run(load_bottom_section(session, api, chat_info, remote_host))
    if not inserted:
        typer.echo(f"No items loaded for {chat_info.id}.")
        return

    built = session.build_sections()
    if drop_temporary_sections(session, built):
        built = session.build_sections()
    _echo_sections(built, output_json=output_json)
