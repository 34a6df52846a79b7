"""CLI (Typer + Rich).

Por qué tan delgada:
- Los comandos solo parsean argumentos, llaman al cliente y pintan tablas.
- Toda la lógica de reintentos/decodificación vive en `core.services`.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import List, Optional, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from cli import doctor
from cli.logging_setup import setup_logging
from cli.ui_components import build_collection_table, build_hot_table, build_search_table
from core.config import AppSettings
from core.domain.models import HotListType, ThingType
from core.errors import ApiError, BoardGameGeekError
from core.services.api import BoardGameGeekApi

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="BoardGameGeek XML API2 client.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _build_api() -> BoardGameGeekApi:
    return BoardGameGeekApi(AppSettings())


def _run(call: Callable[[BoardGameGeekApi], Awaitable[T]]) -> T:
    """Ejecuta `call` con un cliente nuevo y traduce errores a exit code 1."""

    async def _main() -> T:
        async with _build_api() as api:
            return await call(api)

    try:
        return asyncio.run(_main())
    except ApiError as exc:
        _console.print(f"[red]API error:[/red] {escape('; '.join(exc.messages))}")
        raise typer.Exit(code=1)
    except BoardGameGeekError as exc:
        _console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests and retries."),
) -> None:
    setup_logging(verbose=verbose)


@app.command()
def collection(
    username: str = typer.Argument(..., help="BoardGameGeek username."),
    wishlist: bool = typer.Option(False, "--wishlist", help="Only games on the wishlist."),
    brief: bool = typer.Option(False, "--brief", help="Brief mode: names and status only."),
) -> None:
    """Show a user's collection (owned games by default)."""

    async def _call(api: BoardGameGeekApi):
        endpoint = api.collection_brief() if brief else api.collection()
        if wishlist:
            return await endpoint.get_wishlist(username)
        return await endpoint.get_owned(username)

    result = _run(_call)
    title = f"{username}'s wishlist" if wishlist else f"{username}'s collection"
    _console.print(build_collection_table(result, title=title))


@app.command()
def hot(
    list_type: HotListType = typer.Option(HotListType.BOARD_GAME, "--type", "-t", help="Hot list type."),
) -> None:
    """Show the current hot list."""

    result = _run(lambda api: api.hot_list().get(list_type))
    _console.print(build_hot_table(result))


@app.command()
def search(
    query: str = typer.Argument(..., help="Name to search for."),
    exact: bool = typer.Option(False, "--exact", help="Exact name matches only."),
    types: Optional[List[ThingType]] = typer.Option(None, "--type", "-t", help="Item type (repeatable)."),
) -> None:
    """Search items by name."""

    selected = types or [ThingType.BOARD_GAME]

    async def _call(api: BoardGameGeekApi):
        if exact:
            return await api.search().search_exact(query, selected)
        return await api.search().search(query, selected)

    result = _run(_call)
    _console.print(build_search_table(result, query=query))


def run() -> None:
    app()
