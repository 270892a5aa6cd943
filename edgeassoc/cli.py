"""
edge-assoc CLI: set the Lambda@Edge function for one event on a CloudFront distribution.

Inputs come from the environment (LE_DISTRIBUTION_ID, LE_LAMBDA_ARN, LE_EVENT_TYPE,
LE_INCLUDE_BODY, LE_CONFIG_PATH), an optional YAML config file, or flags; flags win.
AWS credentials and region are read by boto3 (AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY, AWS_REGION).
"""

import argparse
import sys
from typing import NoReturn

from edgeassoc.associations import EVENT_TYPES
from edgeassoc.client import Boto3DistributionClient, DistributionClient
from edgeassoc.config import load_request
from edgeassoc.configurator import Configurator
from edgeassoc.errors import EdgeAssocError


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edge-assoc",
        description="Associate a Lambda@Edge function with an event on a distribution's default cache behavior.",
    )
    parser.add_argument("--config", help="YAML config file (apiVersion: edgeassoc/v1)")
    parser.add_argument("--distribution-id", help="CloudFront distribution id (LE_DISTRIBUTION_ID)")
    parser.add_argument("--lambda-arn", help="Versioned function ARN to associate (LE_LAMBDA_ARN)")
    parser.add_argument(
        "--event-type",
        help=f"One of {', '.join(EVENT_TYPES)} (LE_EVENT_TYPE, default viewer-request)",
    )
    parser.add_argument(
        "--include-body",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Expose the request body to the function (LE_INCLUDE_BODY)",
    )
    parser.add_argument("--region", help="AWS region for the API client (AWS_REGION)")
    return parser


def _fail(error: EdgeAssocError) -> NoReturn:
    print(f"Error: {error}", file=sys.stderr)
    sys.exit(error.exit_code)


def run(argv: list[str] | None = None, client: DistributionClient | None = None) -> int:
    """Parse inputs, apply the association, return 0. Exits non-zero on any error."""
    args = _parser().parse_args(argv)
    try:
        request = load_request(vars(args))
    except EdgeAssocError as e:
        _fail(e)

    if client is None:
        client = Boto3DistributionClient(region=request.region)

    outcome = Configurator(client, request).apply_association()
    if outcome.error is not None:
        _fail(outcome.error)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
