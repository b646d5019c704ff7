# =============================================================================
# PROJECT CONFIGURATION
# =============================================================================
# Fill in your values before deploying
# =============================================================================

# Environment-specific AWS account configuration
ENV_CONFIG = {
    "dev": {
        "account": "123456789012",  # Your AWS dev account ID
        "region": "eu-west-1",  # AWS region
    },
    # "prod": {
    #     "account": "123456789013",  # Your AWS prod account ID
    #     "region": "eu-west-1",  # AWS region
    # },
}

# Project prefix used for resource naming (keep short, lowercase, alphanumeric)
PREFIX = "tweets"
