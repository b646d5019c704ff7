from typing import Any

from aws_cdk import CfnOutput, Stack
from constructs import Construct

from cdk import constants
from cdk.lambda_dynamodb_construct import LambdaDynamoDBConstruct


class AppStack(Stack):
    """
    Main application stack that creates the tweet API resources.
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        stage: str,
        table_name: str,
        service_code_path: str = constants.SERVICE_BUILD_FOLDER,
        layer_code_path: str = constants.LAYER_FOLDER,
        **kwargs: Any,
    ) -> None:
        super().__init__(scope, id, **kwargs)

        self.lambda_dynamodb = LambdaDynamoDBConstruct(
            self,
            "LambdaDynamoDB",
            stage=stage,
            table_name=table_name,
            service_code_path=service_code_path,
            layer_code_path=layer_code_path,
        )

        # Expose resources for cross-stack references if needed
        self.table = self.lambda_dynamodb.table
        self.api_function = self.lambda_dynamodb.api_function
        self.http_api = self.lambda_dynamodb.http_api

        # Outputs
        CfnOutput(
            self,
            "TableName",
            value=self.table.table_name,
            description="DynamoDB table name",
        )

        CfnOutput(
            self,
            "ApiFunctionArn",
            value=self.api_function.function_arn,
            description="Tweet API Lambda function ARN",
        )

        CfnOutput(
            self,
            "ApiEndpoint",
            value=self.http_api.api_endpoint,
            description="HTTP API endpoint",
        )
