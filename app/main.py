"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service
or runs one people aggregation from the command line.
"""

import argparse
import asyncio
import json

import uvicorn

from app.bootstrap import bootstrap_create_application, bootstrap_create_people_aggregator
from app.config import config_configure_logging, config_load_settings
from app.domain import FetchError


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with code 1 when `people-fetch` fails.
    """

    argument_parser = argparse.ArgumentParser(description="SWAPI people proxy runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "people-fetch"),
        help="Runtime command: `api` starts server, `people-fetch` prints one aggregated people page as JSON",
        type=str,
    )
    argument_parser.add_argument(
        "--param",
        dest="params",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter forwarded upstream by `people-fetch`, repeatable (e.g. --param page=2)",
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    config_configure_logging(settings.log_level)

    if parsed_arguments.command == "people-fetch":
        try:
            query_parameters = main_parse_query_parameters(parsed_arguments.params)
        except ValueError as error:
            argument_parser.error(str(error))
        people_aggregator = bootstrap_create_people_aggregator(settings)
        outcome = asyncio.run(people_aggregator.aggregator_get_people(query_parameters=query_parameters))
        if isinstance(outcome, FetchError):
            print(f"{outcome.error_code}: {outcome.message}")
            raise SystemExit(1)
        print(json.dumps(outcome.envelope_to_payload(), indent=2))
        return

    application = bootstrap_create_application(settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_config=None,
    )


def main_parse_query_parameters(raw_parameters: list[str]) -> dict[str, str]:
    """Parse repeated `KEY=VALUE` arguments into a flat mapping.

    Args:
        raw_parameters: Raw `--param` values.

    Returns:
        dict[str, str]: Parsed parameters; later keys override earlier ones.

    Raises:
        ValueError: Raised when an argument has no `=` or a blank key.
    """

    query_parameters: dict[str, str] = {}
    for raw_parameter in raw_parameters:
        key, separator, value = raw_parameter.partition("=")
        if not separator or not key.strip():
            raise ValueError(f"invalid --param value {raw_parameter!r}, expected KEY=VALUE")
        query_parameters[key.strip()] = value
    return query_parameters


if __name__ == "__main__":
    main()
