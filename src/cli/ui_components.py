"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas en múltiples comandos.
"""

from __future__ import annotations

from rich.table import Table

from core.domain.models import Collection, CollectionBrief, HotList, SearchResults


def _year(value: int | None) -> str:
    return str(value) if value is not None else "-"


def build_collection_table(collection: Collection | CollectionBrief, *, title: str) -> Table:
    table = Table(title=f"{title} ({collection.total_items} items)")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Year", style="magenta")
    table.add_column("Plays", style="green")
    table.add_column("Status", style="dim")

    for item in collection.items:
        flags = [
            label
            for label, on in (
                ("own", item.status.own),
                ("wishlist", item.status.wishlist),
                ("want to play", item.status.want_to_play),
                ("for trade", item.status.for_trade),
                ("preordered", item.status.preordered),
            )
            if on
        ]
        year = getattr(item, "year_published", None)
        plays = getattr(item, "number_of_plays", None)
        table.add_row(
            str(item.id),
            item.name,
            _year(year),
            str(plays) if plays is not None else "-",
            ", ".join(flags),
        )
    return table


def build_hot_table(hot: HotList) -> Table:
    table = Table(title="Hot list")
    table.add_column("Rank", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Year", style="magenta")
    table.add_column("ID", style="dim")
    for item in sorted(hot.items, key=lambda i: i.rank):
        table.add_row(str(item.rank), item.name, _year(item.year_published), str(item.id))
    return table


def build_search_table(results: SearchResults, *, query: str) -> Table:
    table = Table(title=f"Search: {query!r} ({results.total} results)")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Year", style="magenta")
    table.add_column("Type", style="dim")
    for item in results.items:
        table.add_row(str(item.id), item.name, _year(item.year_published), item.item_type.value)
    return table
