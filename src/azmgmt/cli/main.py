"""CLI entry point."""

import argparse
import sys
from typing import Any, Optional

from azmgmt._package import __version__
from azmgmt.application.services.management_client import ManagementClient
from azmgmt.cli.command_handlers import (
    handle_affinity_groups,
    handle_locations,
    handle_request,
    handle_wait,
)
from azmgmt.cli.console import print_error
from azmgmt.config.manager import load_config
from azmgmt.domain.base.exceptions import ManagementClientError
from azmgmt.infrastructure.logging.logger import setup_logging

HANDLERS = {
    "locations": handle_locations,
    "affinity-groups": handle_affinity_groups,
    "request": handle_request,
    "wait": handle_wait,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="azmgmt", description="Client for the Azure Service Management API"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="Path to the configuration file.")
    parser.add_argument("--subscription-id", help="Subscription id (explicit credentials).")
    parser.add_argument("--certificate", help="PEM client certificate (explicit credentials).")
    parser.add_argument("--key", help="Private key file for --certificate.")
    parser.add_argument("--log-level", help="Log level override.")

    actions = parser.add_subparsers(dest="action", required=True)
    actions.add_parser("locations", help="List available locations.")
    actions.add_parser("affinity-groups", help="List affinity groups.")

    wait = actions.add_parser("wait", help="Wait for an asynchronous operation to finish.")
    wait.add_argument("operation_id", help="Operation id (x-ms-request-id of the asynchronous call).")
    wait.add_argument("--timeout", type=float, help="Give up after this many seconds.")

    request = actions.add_parser("request", help="Send a raw management API request.")
    request.add_argument("method", choices=["GET", "POST", "DELETE"], type=str.upper)
    request.add_argument("path", help="Resource path template; {0} is the subscription id.")
    request.add_argument("args", nargs="*", help="Values for the {1}, {2}, ... placeholders.")
    request.add_argument("--payload-file", help="XML file sent as request body.")
    return parser


def _overrides(args) -> dict[str, Any]:
    return {
        "credentials": {
            "subscription_id": args.subscription_id,
            "certificate_file": args.certificate,
            "key_file": args.key,
        },
        "logging": {"level": args.log_level},
    }


def main(argv: Optional[list[str]] = None) -> int:
    """Run the CLI and return the exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config, _overrides(args))
        setup_logging(config.logging)
        with ManagementClient.from_config(config) as client:
            return HANDLERS[args.action](args, client)
    except ManagementClientError as e:
        print_error(f"{e.__class__.__name__}: {e}")
        return 1
    except OSError as e:
        print_error(f"I/O error: {e}")
        return 1
    except KeyboardInterrupt:
        print_error("Interrupted")
        return 130


def cli_main() -> None:
    """Entry point function for console scripts."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
