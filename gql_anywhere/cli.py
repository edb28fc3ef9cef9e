"""Command-line interface for gql-anywhere."""

import json
import logging

import click
import httpx
from graphql import GraphQLSyntaxError

from .core.auth import Auth, BearerAuth, HeaderAuth, NoAuth
from .core.errors import AnywhereError
from .core.executor import execute
from .core.loader import load_document, load_json, load_variables
from .core.options import DuplicateKeyPolicy, ExecutionOptions
from .core.resolvers import property_resolver


def build_auth(headers: tuple[str, ...], bearer_token: str | None) -> Auth:
    """Combine --header and --bearer-token options into one auth handler."""
    if not headers and not bearer_token:
        return NoAuth()
    combined = HeaderAuth.from_lines(list(headers)).get_headers()
    if bearer_token:
        combined.update(BearerAuth(bearer_token).get_headers())
    return HeaderAuth(combined)


@click.group()
@click.version_option(package_name="gql-anywhere")
def main():
    """Query any JSON data with GraphQL.

    Runs a GraphQL query against local or remote JSON without a server,
    returning just the fields the query asks for.
    """
    pass


@main.command()
@click.option(
    "--query",
    "-q",
    required=True,
    help="GraphQL query text, or path to a .graphql/.gql file.",
)
@click.option(
    "--data",
    "-d",
    default=None,
    help="JSON file path or http(s) URL to query (default: no root value).",
)
@click.option(
    "--variables",
    "-V",
    default=None,
    help="Variables as a JSON object string or path to a JSON file.",
)
@click.option(
    "--operation-name",
    default=None,
    help="Operation to run when the document defines several.",
)
@click.option(
    "--merge-duplicates",
    is_flag=True,
    help="Deep-merge fields selected more than once instead of overwriting.",
)
@click.option(
    "--header",
    "-H",
    multiple=True,
    help="Extra request header for URL data, as 'Name: value'. Repeatable.",
)
@click.option(
    "--bearer-token",
    envvar="GQL_ANYWHERE_TOKEN",
    default=None,
    help="Bearer token for URL data (or set GQL_ANYWHERE_TOKEN).",
)
@click.option(
    "--timeout",
    default=30.0,
    show_default=True,
    help="Request timeout in seconds for URL data.",
)
@click.option(
    "--indent",
    default=2,
    show_default=True,
    help="JSON output indentation.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def run(
    query: str,
    data: str | None,
    variables: str | None,
    operation_name: str | None,
    merge_duplicates: bool,
    header: tuple[str, ...],
    bearer_token: str | None,
    timeout: float,
    indent: int,
    verbose: bool,
):
    """Run a query against JSON data and print the result.

    Each field is read from the data by name.

    Examples:

        gql-anywhere run -q '{ title user { login } }' -d issue.json

        gql-anywhere run -q query.graphql -d https://api.github.com/repos/octocat/Hello-World/issues/1

        gql-anywhere run -q query.graphql -d data.json -V '{"first": 10}'
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        document = load_document(query)
        variable_values = load_variables(variables)

        root_value = None
        if data is not None:
            if verbose:
                click.echo(f"Loading data from {data}...", err=True)
            root_value = load_json(data, auth=build_auth(header, bearer_token), timeout=timeout)

        options = ExecutionOptions(
            duplicate_keys=DuplicateKeyPolicy.MERGE if merge_duplicates else DuplicateKeyPolicy.OVERWRITE
        )
        if verbose:
            click.echo("Executing query...", err=True)
        result = execute(
            property_resolver,
            document,
            root_value,
            None,
            variable_values,
            options=options,
            operation_name=operation_name,
        )
    except (AnywhereError, GraphQLSyntaxError, httpx.HTTPError, ValueError, OSError) as e:
        # json.JSONDecodeError is a ValueError
        raise click.ClickException(str(e)) from e

    click.echo(json.dumps(result, indent=indent or None, default=str))


if __name__ == "__main__":
    main()
