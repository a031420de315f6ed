"""Command-line interface for the contact book.

Commands:
- list / search / suggest / bfs / dfs: load CSVs into a fresh store and query it
- shell: interactive session over one in-memory store
- compare: time the contract operations on every backend
"""

import logging
import shlex
import time
from dataclasses import dataclass, replace
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from contactbook.application import (
    CapacityExceeded,
    ConnectionAdded,
    ConnectionRemoved,
    ContactAdded,
    ContactBookService,
    ContactDeleted,
    ContactUpdated,
    DuplicateIdentity,
    Invalid,
    InvalidConnection,
    NotFound,
    UnsupportedCapability,
)
from contactbook.config import Settings, load_settings
from contactbook.domain import ContactRecord
from contactbook.infrastructure import (
    BACKENDS,
    build_store,
    load_connections,
    load_contacts,
)

app = typer.Typer(help="Contact book: contacts, connections, suggestions and traversal.")
console = Console()


@dataclass
class CliState:
    settings: Settings
    contacts: Path | None = None
    connections: Path | None = None


def describe(result: object) -> str:
    """One-line, user-facing text for any result value."""
    if isinstance(result, ContactAdded):
        return f"Added {result.record}."
    if isinstance(result, ContactDeleted):
        return f"Deleted {result.record}."
    if isinstance(result, ContactUpdated):
        return f"Updated {result.previous} -> {result.current}."
    if isinstance(result, ConnectionAdded):
        if not result.changed:
            return f"{result.source.name} and {result.target.name} are already connected."
        return f"Connected {result.source.name} -> {result.target.name}."
    if isinstance(result, ConnectionRemoved):
        if not result.changed:
            return f"No connection between {result.source.name} and {result.target.name}."
        return f"Disconnected {result.source.name} -> {result.target.name}."
    if isinstance(result, DuplicateIdentity):
        return f"Contact '{result.name}' ({result.id}) already exists."
    if isinstance(result, NotFound):
        return f"Contact not found: '{result.name}'."
    if isinstance(result, CapacityExceeded):
        return f"Contact book is full (capacity {result.capacity})."
    if isinstance(result, InvalidConnection):
        missing = ", ".join(f"'{m}'" for m in result.missing)
        return f"Cannot connect '{result.source}' and '{result.target}'; not found: {missing}."
    if isinstance(result, UnsupportedCapability):
        return f"{result.backend} does not support {result.capability}."
    if isinstance(result, Invalid):
        return f"Invalid input: {result.reason}"
    return str(result)


def _contacts_table(title: str, records) -> Table:
    table = Table(title=title, min_width=len(title) + 4)
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("ID", justify="right")
    for i, record in enumerate(records, start=1):
        table.add_row(str(i), record.name, str(record.id))
    return table


def _fail(result: object) -> None:
    console.print(f"[red]{describe(result)}[/red]")
    raise typer.Exit(code=1)


def open_book(state: CliState) -> ContactBookService:
    """Build a fresh store from settings and load the configured CSV files into it."""
    service = ContactBookService(build_store(state.settings))
    try:
        if state.contacts is not None:
            report = load_contacts(service.store, state.contacts)
            for line, failure in report.rejected:
                console.print(f"[yellow]{state.contacts}:{line}: {describe(failure)}[/yellow]")
        if state.connections is not None:
            report = load_connections(service.store, state.connections)
            for line, failure in report.rejected:
                console.print(f"[yellow]{state.connections}:{line}: {describe(failure)}[/yellow]")
    except (OSError, ValueError) as exc:
        console.print(f"[red]Could not load data: {exc}[/red]")
        raise typer.Exit(code=2) from None
    return service


@app.callback()
def main(
    ctx: typer.Context,
    contacts: Path | None = typer.Option(None, help="CSV of id,name rows"),
    connections: Path | None = typer.Option(None, help="CSV of id,source,target rows"),
    config: Path | None = typer.Option(None, help="YAML settings file"),
    backend: str | None = typer.Option(None, help="adjacency_list, adjacency_matrix or flat_map"),
    directed: bool | None = typer.Option(None, "--directed/--undirected", help="Edge direction"),
    capacity: int | None = typer.Option(None, help="Adjacency matrix capacity"),
    log_level: str | None = typer.Option(None, help="Logging level"),
):
    """Contact book commands. Data lives in memory for the duration of one command."""
    try:
        settings = load_settings(
            config,
            backend=backend,
            directed=directed,
            capacity=capacity,
            log_level=log_level,
        )
    except (OSError, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from None
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level,
    )
    ctx.obj = CliState(settings=settings, contacts=contacts, connections=connections)


@app.command("list")
def list_contacts(ctx: typer.Context):
    """List every contact in storage order."""
    service = open_book(ctx.obj)
    console.print(_contacts_table(f"Contacts ({service.backend_name})", service.list_contacts()))


@app.command()
def search(ctx: typer.Context, name: str = typer.Argument(..., help="Contact name")):
    """Look up one contact by name."""
    result = open_book(ctx.obj).search(name)
    if isinstance(result, NotFound):
        _fail(result)
    console.print(f"Name: {result.name} | ID: {result.id}")


@app.command()
def suggest(ctx: typer.Context, name: str = typer.Argument(..., help="Contact name")):
    """Suggest friends of friends for a contact."""
    result = open_book(ctx.obj).suggest(name)
    if not isinstance(result, list):
        _fail(result)
    if not result:
        console.print(f"No suggestions for {name}.")
        return
    console.print(_contacts_table(f"Suggestions for {name}", result))


@app.command()
def bfs(ctx: typer.Context, name: str = typer.Argument(..., help="Start contact")):
    """Breadth-first traversal from a contact."""
    result = open_book(ctx.obj).bfs(name)
    if isinstance(result, (NotFound, UnsupportedCapability)):
        _fail(result)
    console.print(_contacts_table(f"BFS from {name}", result))


@app.command()
def dfs(ctx: typer.Context, name: str = typer.Argument(..., help="Start contact")):
    """Depth-first traversal from a contact."""
    result = open_book(ctx.obj).dfs(name)
    if isinstance(result, (NotFound, UnsupportedCapability)):
        _fail(result)
    console.print(_contacts_table(f"DFS from {name}", result))


SHELL_HELP = """Commands:
  add NAME ID                 add a contact
  search NAME                 look up a contact
  delete NAME                 delete a contact and its connections
  update NAME NEW_NAME NEW_ID replace a contact's name and id
  connect A B                 connect A -> B (both ways when undirected)
  disconnect A B              remove the connection
  neighbors NAME              direct connections
  suggest NAME                friends of friends
  bfs NAME / dfs NAME         traverse from NAME
  list                        all contacts
  help                        this text
  quit                        leave the shell
Quote names that contain spaces: add "Ada Lovelace" 7"""

_SHELL_ARITY = {
    "add": 2,
    "search": 1,
    "delete": 1,
    "update": 3,
    "connect": 2,
    "disconnect": 2,
    "neighbors": 1,
    "suggest": 1,
    "bfs": 1,
    "dfs": 1,
    "list": 0,
}


def run_shell_command(service: ContactBookService, command: str, args: list[str]) -> str | Table:
    """Execute one shell command and return what to print."""
    if command == "add":
        return describe(service.add_contact(args[0], args[1]))
    if command == "search":
        result = service.search(args[0])
        return describe(result) if isinstance(result, NotFound) else f"Name: {result.name} | ID: {result.id}"
    if command == "delete":
        return describe(service.delete(args[0]))
    if command == "update":
        return describe(service.update(args[0], args[1], args[2]))
    if command == "connect":
        return describe(service.add_connection(args[0], args[1]))
    if command == "disconnect":
        return describe(service.remove_connection(args[0], args[1]))
    if command in ("neighbors", "suggest"):
        result = getattr(service, command)(args[0])
        if not isinstance(result, list):
            return describe(result)
        return _contacts_table(f"{command.capitalize()} of {args[0]}", result)
    if command in ("bfs", "dfs"):
        result = getattr(service, command)(args[0])
        if isinstance(result, (NotFound, UnsupportedCapability)):
            return describe(result)
        return _contacts_table(f"{command.upper()} from {args[0]}", result)
    if command == "list":
        return _contacts_table(f"Contacts ({service.backend_name})", service.list_contacts())
    raise ValueError(f"Unknown command {command!r}")


@app.command()
def shell(ctx: typer.Context):
    """Interactive session. Starts from the loaded CSVs, if any."""
    service = open_book(ctx.obj)
    console.print(f"Contact book shell ({service.backend_name}). Type 'help' for commands.")
    while True:
        try:
            line = console.input("contactbook> ")
        except EOFError:
            break
        try:
            parts = shlex.split(line)
        except ValueError as exc:
            console.print(f"[red]{exc}[/red]")
            continue
        if not parts:
            continue
        command, args = parts[0].lower(), parts[1:]
        if command in ("quit", "exit"):
            break
        if command == "help":
            console.print(SHELL_HELP, markup=False)
            continue
        if command not in _SHELL_ARITY:
            console.print(f"Unknown command '{command}'. Type 'help'.")
            continue
        if len(args) != _SHELL_ARITY[command]:
            console.print(f"'{command}' takes {_SHELL_ARITY[command]} argument(s). Type 'help'.")
            continue
        console.print(run_shell_command(service, command, args))


def time_backend(settings: Settings, count: int) -> dict[str, float]:
    """Milliseconds per operation group for one backend over a chain of `count` contacts."""
    service = ContactBookService(build_store(settings))
    records = [ContactRecord(f"Contact{i}", 1000 + i) for i in range(count)]
    timings: dict[str, float] = {}

    start = time.perf_counter()
    for record in records:
        service.store.add(record)
    timings["add"] = (time.perf_counter() - start) * 1000

    start = time.perf_counter()
    for record in records:
        service.search(record.name)
    timings["search"] = (time.perf_counter() - start) * 1000

    start = time.perf_counter()
    for a, b in zip(records, records[1:]):
        service.add_connection(a.name, b.name)
    timings["connect"] = (time.perf_counter() - start) * 1000

    start = time.perf_counter()
    for record in records:
        service.suggest(record.name)
    timings["suggest"] = (time.perf_counter() - start) * 1000

    start = time.perf_counter()
    list(service.list_contacts())
    timings["list"] = (time.perf_counter() - start) * 1000
    return timings


@app.command()
def compare(
    ctx: typer.Context,
    count: int = typer.Option(200, min=1, help="Number of synthetic contacts"),
):
    """Time add, search, connect, suggest and list on every backend."""
    base: Settings = ctx.obj.settings
    table = Table(title=f"Backend comparison ({count} contacts, ms)")
    table.add_column("Backend")
    operations = ("add", "search", "connect", "suggest", "list")
    for op in operations:
        table.add_column(op, justify="right")
    for name in BACKENDS:
        settings = replace(base, backend=name, capacity=max(base.capacity, count))
        timings = time_backend(settings, count)
        table.add_row(name, *(f"{timings[op]:.2f}" for op in operations))
    console.print(table)
    console.print("flat_map keeps no connections; its connect/suggest rows time the capability check only.")


if __name__ == "__main__":
    app()
