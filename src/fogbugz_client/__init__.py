import json
import logging
import os
import sys
from collections.abc import Callable
from typing import Any

import click
from dotenv import load_dotenv

from fogbugz_client.utils.logging import setup_logging

__version__ = "0.3.0"

# Initialize logging with appropriate level
logging_level = logging.WARNING
if os.getenv("FOGBUGZ_VERBOSE", "").lower() in ("true", "1", "yes"):
    logging_level = logging.DEBUG

logger = setup_logging(logging_level)


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _run(ctx: click.Context, operation: Callable[[Any], Any]) -> Any:
    """Log on, run one operation and log off again unless a token was given."""
    from .exceptions import FogBugzError
    from .fogbugz import FogBugzFetcher

    try:
        fetcher = FogBugzFetcher()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    token = ctx.obj.get("token")
    if token:
        fetcher.set_token(token)

    try:
        fetcher.logon()
        try:
            return operation(fetcher)
        finally:
            if not token:
                fetcher.logoff()
                fetcher.forget_token()
    except FogBugzError as e:
        logger.debug("FogBugz command failed", exc_info=True)
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(__version__, prog_name="fogbugz-client")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--token",
    envvar="FOGBUGZ_TOKEN",
    help="Existing FogBugz API token to use instead of logging on",
)
@click.pass_context
def main(
    ctx: click.Context, verbose: int, env_file: str | None, token: str | None
) -> None:
    """FogBugz client - query a FogBugz install through its XML API.

    Connection settings come from FOGBUGZ_HOST, FOGBUGZ_USERNAME,
    FOGBUGZ_PASSWORD (and optionally FOGBUGZ_PROTOCOL), or from the JSON
    file named by FOGBUGZ_CONFIG.
    """
    if verbose == 1:
        current_logging_level = logging.INFO
    elif verbose >= 2:  # -vv or more
        current_logging_level = logging.DEBUG
    else:
        current_logging_level = logging_level

    global logger
    logger = setup_logging(current_logging_level)
    logger.debug(f"Logging level set to: {logging.getLevelName(current_logging_level)}")

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        logger.debug(
            "Attempting to load environment from default .env file if it exists"
        )
        load_dotenv(override=True)

    ctx.ensure_object(dict)
    ctx.obj["token"] = token


@main.command()
@click.pass_context
def filters(ctx: click.Context) -> None:
    """List the saved filters of the FogBugz user."""
    result = _run(ctx, lambda fetcher: fetcher.list_filters())
    _echo_json([f.to_simplified_dict() for f in result])


@main.command()
@click.argument("query")
@click.option("--cols", help="Comma-separated list of columns to return")
@click.option("--max", "max_results", type=int, help="Maximum number of cases")
@click.pass_context
def search(
    ctx: click.Context, query: str, cols: str | None, max_results: int | None
) -> None:
    """Search cases with FogBugz search syntax."""
    result = _run(ctx, lambda fetcher: fetcher.search(query, cols, max_results))
    cases = result if isinstance(result, list) else [result]
    _echo_json([case.to_simplified_dict() for case in cases])


@main.command()
@click.argument("bug_id")
@click.option("--cols", help="Comma-separated list of columns to return")
@click.option("--raw", is_flag=True, help="Include the raw XML-derived case data")
@click.pass_context
def bug(ctx: click.Context, bug_id: str, cols: str | None, raw: bool) -> None:
    """Show a single case."""
    result = _run(ctx, lambda fetcher: fetcher.get_bug(bug_id, cols))
    cases = result if isinstance(result, list) else [result]
    _echo_json([case.to_simplified_dict(include_raw=raw) for case in cases])


@main.command()
@click.argument(
    "kind",
    type=click.Choice(["projects", "areas", "priorities", "people", "statuses"]),
)
@click.pass_context
def lists(ctx: click.Context, kind: str) -> None:
    """Show one of the FogBugz lookup lists."""
    result = _run(ctx, lambda fetcher: getattr(fetcher, f"list_{kind}")())
    _echo_json([item.to_simplified_dict() for item in result])


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    sys.exit(main())
