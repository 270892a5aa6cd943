"""Tests for the boto3 CloudFront adapter."""

from unittest.mock import MagicMock, patch

from botocore.exceptions import ClientError

from edgeassoc.client import Boto3DistributionClient, is_precondition_failure


def _error(code: str, status: int) -> ClientError:
    return ClientError(
        {"Error": {"Code": code, "Message": code}, "ResponseMetadata": {"HTTPStatusCode": status}},
        "UpdateDistribution",
    )


def test_get_distribution_config_returns_config_and_etag() -> None:
    cf = MagicMock()
    cf.get_distribution_config.return_value = {
        "DistributionConfig": {"CallerReference": "x"},
        "ETag": "E2ABC",
    }

    config, etag = Boto3DistributionClient(client=cf).get_distribution_config("E123")

    cf.get_distribution_config.assert_called_once_with(Id="E123")
    assert config == {"CallerReference": "x"}
    assert etag == "E2ABC"


def test_update_passes_if_match() -> None:
    cf = MagicMock()
    config = {"CallerReference": "x"}

    Boto3DistributionClient(client=cf).update_distribution_config("E123", config, "E2ABC")

    cf.update_distribution.assert_called_once_with(Id="E123", DistributionConfig=config, IfMatch="E2ABC")


@patch("edgeassoc.client.boto3.client")
def test_default_client_is_cloudfront(mock_client: MagicMock) -> None:
    Boto3DistributionClient(region="us-east-1")
    mock_client.assert_called_once_with("cloudfront", region_name="us-east-1")


def test_is_precondition_failure() -> None:
    assert is_precondition_failure(_error("PreconditionFailed", 412))
    assert is_precondition_failure(_error("Unknown", 412))
    assert is_precondition_failure(_error("InvalidIfMatchVersion", 400))
    assert not is_precondition_failure(_error("AccessDenied", 403))
    assert not is_precondition_failure(RuntimeError("boom"))
