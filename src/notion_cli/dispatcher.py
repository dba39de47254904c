"""Command registry and the error boundary of the CLI.

:func:`dispatch` is the only place that turns errors into exit codes;
everything below it raises.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence

import click
import httpx
from loguru import logger

from notion import NotionClient
from notion.errors import NotionError

from . import commands
from .output import emit, error
from .settings import Settings, load_settings

USAGE = """
Notion CLI

Usage: notion-cli <command> [args]

Commands:
  test                      Test connection and list accessible pages
  query-database <id>       Query database entries
    [--filter '<json>']     Filter results
  add-entry <id>            Add entry to database
    --title "Name"
    [--properties '<json>'] Additional properties
    [--title-property NAME] Title property name (default: $NOTION_TITLE_PROPERTY or "Name")
  get-page <id>             Get page content and properties
    [--simple]              Simplify page properties
  update-page <id>          Update page properties
    --properties '<json>'   Properties to update
  get-database <id>         Get database schema
  search <query>            Search workspace

Options:
  -v, --verbose             Debug logging on stderr
  --version                 Show the version and exit
  -h, --help                Show this message and exit

Environment:
  NOTION_TOKEN              Required. Integration token (also read from .env)
  NOTION_TITLE_PROPERTY     Title property used by add-entry --title
  NOTION_LOG_LEVEL          Log level (default: WARNING)

Examples:
  notion-cli test
  notion-cli query-database abc123... --filter '{"property":"Status","select":{"equals":"Done"}}'
  notion-cli add-entry abc123... --title "New Idea" --properties '{"Status":{"select":{"name":"Idea"}}}'
  notion-cli search "content ideas"

ID Format:
  From URL: https://www.notion.so/workspace/ABC123...
  Use: ABC123... (32 characters, hyphens optional)
"""


class Command(str, Enum):
    TEST = "test"
    QUERY_DATABASE = "query-database"
    ADD_ENTRY = "add-entry"
    GET_PAGE = "get-page"
    UPDATE_PAGE = "update-page"
    SEARCH = "search"
    GET_DATABASE = "get-database"


Handler = Callable[..., Awaitable[Any]]


@dataclass
class CommandSpec:
    handler: Handler
    help: str
    params: List[click.Parameter] = field(default_factory=list)

    def parser(self, name: str) -> click.Command:
        return click.Command(
            name,
            params=self.params,
            help=self.help,
            context_settings={"help_option_names": ["-h", "--help"]},
        )


REGISTRY: Dict[Command, CommandSpec] = {
    Command.TEST: CommandSpec(
        commands.check_connection,
        "Test connection and list accessible pages.",
    ),
    Command.QUERY_DATABASE: CommandSpec(
        commands.query_database,
        "Query database entries.",
        [
            click.Argument(["database_id"]),
            click.Option(["--filter", "filter_json"], help="Filter in Notion's query-filter JSON shape."),
        ],
    ),
    Command.ADD_ENTRY: CommandSpec(
        commands.add_entry,
        "Add entry to database.",
        [
            click.Argument(["database_id"]),
            click.Option(["--title"], help="Title of the new entry."),
            click.Option(["--properties", "properties_json"], help="Additional typed properties as JSON."),
            click.Option(["--title-property"], help="Name of the title property."),
        ],
    ),
    Command.GET_PAGE: CommandSpec(
        commands.get_page,
        "Get page content and properties.",
        [
            click.Argument(["page_id"]),
            click.Option(["--simple"], is_flag=True, help="Simplify page properties."),
        ],
    ),
    Command.UPDATE_PAGE: CommandSpec(
        commands.update_page,
        "Update page properties.",
        [
            click.Argument(["page_id"]),
            click.Option(["--properties", "properties_json"], help="Properties to update as JSON (required)."),
        ],
    ),
    Command.SEARCH: CommandSpec(
        commands.search,
        "Search workspace.",
        [click.Argument(["query"], nargs=-1)],
    ),
    Command.GET_DATABASE: CommandSpec(
        commands.get_database,
        "Get database schema.",
        [click.Argument(["database_id"])],
    ),
}


def parse_args(command: Command, args: Sequence[str]) -> Dict[str, Any]:
    """Parse a command's positional args and flags with click.

    Raises:
        click.UsageError: on missing arguments or unknown flags.
        click.exceptions.Exit: after printing ``--help`` output.
    """
    parser = REGISTRY[command].parser(command.value)
    with parser.make_context(command.value, list(args)) as ctx:
        return dict(ctx.params)


async def dispatch(
    name: str,
    args: Sequence[str] = (),
    *,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> int:
    """Run one command and return the process exit code.

    Args:
        name: Command name, e.g. ``query-database``.
        args: Everything after the command name.
        settings: Configuration; read from the environment when omitted.
        transport: httpx transport for the Notion client, used by tests.
    """
    try:
        command = Command(name)
    except ValueError:
        click.echo(f"❌ Unknown command: {name}", err=True)
        click.echo(USAGE, err=True)
        return 1

    entry = REGISTRY[command]
    try:
        params = parse_args(command, args)
        settings = settings or load_settings()
        async with NotionClient(
            settings.notion_token,
            api_base=settings.api_base,
            version=settings.notion_version,
            timeout=settings.http_timeout,
            transport=transport,
        ) as client:
            result = await entry.handler(client, settings, **params)
        emit(result)
    except click.exceptions.Exit as e:
        return e.exit_code
    except click.ClickException as e:
        error(e.format_message())
        return 1
    except NotionError as e:
        error(str(e), e.hint)
        return e.exit_code
    except Exception as e:
        logger.opt(exception=e).debug(f"[dispatch] {command.value} failed")
        error(f"{type(e).__name__}: {e}")
        return 1

    return 0
