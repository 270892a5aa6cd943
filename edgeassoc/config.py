"""Association request loading: environment, optional YAML config file, CLI overrides."""

from dataclasses import dataclass
import os
from typing import Any, Mapping

import yaml

from edgeassoc.associations import DEFAULT_EVENT_TYPE
from edgeassoc.errors import InvalidConfiguration, MissingConfiguration
from edgeassoc.spec.validator import validate_config_file

ENV_DISTRIBUTION_ID = "LE_DISTRIBUTION_ID"
ENV_EVENT_TYPE = "LE_EVENT_TYPE"
ENV_LAMBDA_ARN = "LE_LAMBDA_ARN"
ENV_INCLUDE_BODY = "LE_INCLUDE_BODY"
ENV_CONFIG_PATH = "LE_CONFIG_PATH"

_ALTERNATIVES = {
    ENV_DISTRIBUTION_ID: ("--distribution-id", "distributionId in the config file"),
    ENV_LAMBDA_ARN: ("--lambda-arn", "lambdaArn in the config file"),
}

_TRUE = ("true", "1", "yes")
_FALSE = ("false", "0", "no")


@dataclass
class AssociationRequest:
    """Validated inputs for one run."""

    distribution_id: str
    function_arn: str
    event_type: str = DEFAULT_EVENT_TYPE
    include_body: bool | None = None
    region: str | None = None


def missing(field: str) -> MissingConfiguration:
    """MissingConfiguration naming every place field can be supplied."""
    return MissingConfiguration(field, _ALTERNATIVES.get(field, ()))


def parse_bool(field: str, value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise InvalidConfiguration(field, f"expected true/false, got {value!r}")


def load_config_file(path: str) -> dict[str, Any]:
    """Load and validate a YAML config file. Raises InvalidConfiguration."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise InvalidConfiguration(ENV_CONFIG_PATH, f"config file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidConfiguration(ENV_CONFIG_PATH, f"cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise InvalidConfiguration(ENV_CONFIG_PATH, f"invalid YAML in {path}: {e}") from e
    validate_config_file(data, ENV_CONFIG_PATH, path)
    return data


def _first(*values: Any) -> Any:
    """First value that is not None or an empty/blank string."""
    for v in values:
        if v is None:
            continue
        if isinstance(v, str) and not v.strip():
            continue
        return v.strip() if isinstance(v, str) else v
    return None


def load_request(
    overrides: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> AssociationRequest:
    """Resolve inputs with precedence CLI override > environment > config file > default.

    Raises MissingConfiguration before anything touches the network.
    """
    overrides = overrides or {}
    env = os.environ if environ is None else environ

    file_data: dict[str, Any] = {}
    config_path = _first(overrides.get("config"), env.get(ENV_CONFIG_PATH))
    if config_path:
        file_data = load_config_file(config_path)

    distribution_id = _first(
        overrides.get("distribution_id"), env.get(ENV_DISTRIBUTION_ID), file_data.get("distributionId")
    )
    if not distribution_id:
        raise missing(ENV_DISTRIBUTION_ID)

    function_arn = _first(
        overrides.get("lambda_arn"), env.get(ENV_LAMBDA_ARN), file_data.get("lambdaArn")
    )
    if not function_arn:
        raise missing(ENV_LAMBDA_ARN)

    event_type = _first(
        overrides.get("event_type"), env.get(ENV_EVENT_TYPE), file_data.get("eventType")
    ) or DEFAULT_EVENT_TYPE

    include_body = overrides.get("include_body")
    if include_body is None:
        env_body = _first(env.get(ENV_INCLUDE_BODY))
        if env_body is not None:
            include_body = parse_bool(ENV_INCLUDE_BODY, env_body)
        else:
            include_body = file_data.get("includeBody")

    region = _first(overrides.get("region"), env.get("AWS_REGION"), file_data.get("region"))

    return AssociationRequest(
        distribution_id=distribution_id,
        function_arn=function_arn,
        event_type=event_type,
        include_body=include_body,
        region=region,
    )
