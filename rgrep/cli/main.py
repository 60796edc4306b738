"""rgrep command line interface.

Parses options into a SearchConfig, runs the search service and writes one
rendered record per line to STDOUT. Every option can also be supplied
through an ``RGREP_<OPTION>`` environment variable.
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from rgrep import __version__
from rgrep.constants import DEFAULT_GROUP_SEPARATOR, ENV_PREFIX
from rgrep.interfaces.search import SearchConfig
from rgrep.search.render import Renderer
from rgrep.search.service import SearchService
from rgrep.types.errors import ConfigurationError, RgrepError
from rgrep.utils.logger import configure_logging, logger

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "auto_envvar_prefix": ENV_PREFIX,
}

NUM = click.IntRange(min=0)


def resolve_context(
    after_context: Optional[int],
    before_context: Optional[int],
    context: Optional[int],
) -> tuple[int, int]:
    """Combine -A/-B with -C; explicit -A/-B win over -C."""
    default = context or 0
    after = after_context if after_context is not None else default
    before = before_context if before_context is not None else default
    return after, before


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="rgrep", message="%(prog)s v%(version)s")
@click.argument("query")
@click.argument("path", type=click.Path())
@click.option("-i", "--ignore-case", is_flag=True, help="Ignore case distinctions")
@click.option("-w", "--word-regexp", is_flag=True, help="Match only whole words")
@click.option("-x", "--line-regexp", is_flag=True, help="Match only whole lines")
@click.option("-v", "--invert-match", is_flag=True, help="Select non-matching lines")
@click.option("-c", "--count", is_flag=True, help="Print only a count of selected lines per file")
@click.option("-n", "--line-number", is_flag=True, help="Prefix each line with its line number")
@click.option("--color", is_flag=True, help="Highlight matches, paths and line numbers")
@click.option("-A", "--after-context", type=NUM, default=None, metavar="NUM", help="Print NUM lines of trailing context")
@click.option("-B", "--before-context", type=NUM, default=None, metavar="NUM", help="Print NUM lines of leading context")
@click.option("-C", "--context", type=NUM, default=None, metavar="NUM", help="Print NUM lines of output context")
@click.option(
    "--group-separator",
    default=DEFAULT_GROUP_SEPARATOR,
    show_default=True,
    metavar="SEP",
    help="Print SEP between non-adjacent groups of context",
)
@click.option("--no-group-separator", is_flag=True, help="Do not print a separator between groups")
@click.option("-r", "--recursive", is_flag=True, help="Search every file under PATH")
@click.option("--debug", is_flag=True, help="Log debug output to stderr")
def cli(
    query: str,
    path: str,
    ignore_case: bool,
    word_regexp: bool,
    line_regexp: bool,
    invert_match: bool,
    count: bool,
    line_number: bool,
    color: bool,
    after_context: Optional[int],
    before_context: Optional[int],
    context: Optional[int],
    group_separator: str,
    no_group_separator: bool,
    recursive: bool,
    debug: bool,
):
    """Search PATH for lines containing the literal text QUERY."""
    configure_logging(debug)

    after, before = resolve_context(after_context, before_context, context)
    config = SearchConfig(
        invert_match=invert_match,
        count=count,
        line_number=line_number,
        color=color,
        after_context=after,
        before_context=before,
        group_separator="" if no_group_separator else group_separator,
    )
    logger.debug(f"Searching {path!r} for {query!r} with {config}")

    renderer = Renderer.for_config(config)

    try:
        service = SearchService.create(
            query,
            ignore_case=ignore_case,
            word_regexp=word_regexp,
            line_regexp=line_regexp,
            config=config,
        )
        for record in service.search_path(path, recursive=recursive):
            click.echo(renderer.render(record), color=True if color else None)
    except ConfigurationError as e:
        raise click.UsageError(e.user_message) from e
    except RgrepError as e:
        logger.debug(e.get_formatted_message())
        click.echo(f"Application error: {e.user_message}", err=True)
        sys.exit(1)


def main() -> None:
    """Console script entry point."""
    cli(prog_name="rgrep")


if __name__ == "__main__":
    main()
