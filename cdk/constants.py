"""
CDK constants for the tweet API infrastructure.
"""

# Service configuration
SERVICE_NAME = "TweetApi"
POWERTOOLS_SERVICE_NAME = "POWERTOOLS_SERVICE_NAME"
POWERTOOLS_LOG_LEVEL = "LOG_LEVEL"
TABLE_NAME_ENV_VAR = "TABLE_NAME"
API_PREFIX_ENV_VAR = "API_PREFIX"
RESOURCE_NAME_ENV_VAR = "RESOURCE_NAME"

# Routing
API_PREFIX = "api"
RESOURCE_NAME = "tweet"

# Build paths
SERVICE_BUILD_FOLDER = ".build/service"
LAYER_FOLDER = "layer"  # requirements.txt bundled by PythonLayerVersion

# IAM
LAMBDA_BASIC_EXECUTION_ROLE = "AWSLambdaBasicExecutionRole"

# DynamoDB key schema
PARTITION_KEY = "partition_key"
SORT_KEY = "item_id"

# Lambda configuration
LAMBDA_MEMORY_SIZE = 256  # MB
LAMBDA_TIMEOUT = 10  # seconds
