import os
from dataclasses import dataclass

import pytest

# Set environment variables before any imports to disable AWS Lambda Powertools features
# This must be done before importing any service modules that use Tracer
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "test")
os.environ.setdefault("TABLE_NAME", "test-table")
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-1")


def pytest_configure(config):
    """
    Pytest hook that runs before test collection.
    Ensures environment variables are set before any service modules are imported.
    """
    os.environ["POWERTOOLS_TRACE_DISABLED"] = "true"
    os.environ["POWERTOOLS_SERVICE_NAME"] = "test"


@dataclass
class FakeLambdaContext:
    function_name: str = "tweets-api-test"
    memory_limit_in_mb: int = 256
    invoked_function_arn: str = "arn:aws:lambda:eu-west-1:123456789012:function:tweets-api-test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()
