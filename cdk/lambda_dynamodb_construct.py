"""
Lambda DynamoDB Construct.

A construct that creates the tweet API Lambda function with a shared layer,
its DynamoDB table and an HTTP API in front of it.
"""

from typing import Any

from aws_cdk import Duration, RemovalPolicy
from aws_cdk import aws_apigatewayv2 as apigwv2
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_logs as logs
from aws_cdk.aws_apigatewayv2_integrations import HttpLambdaIntegration
from aws_cdk.aws_lambda_python_alpha import PythonLayerVersion
from cdk_nag import NagSuppressions
from constructs import Construct

from cdk import constants


class LambdaDynamoDBConstruct(Construct):
    """
    A construct that creates the tweet API.

    Features:
    - DynamoDB table with partition_key/item_id keys
    - Lambda layer for shared dependencies (aws-lambda-powertools, pydantic)
    - API Lambda handler routing all item operations
    - HTTP API forwarding /api/* to the handler
    - Proper IAM permissions
    - CloudWatch log group with retention
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

        self.stage = stage
        self.table_name = table_name
        self.service_code_path = service_code_path
        self.layer_code_path = layer_code_path

        self.table = self._create_table()
        self.layer = self._create_layer()
        self.lambda_role = self._create_lambda_role()

        self.api_function = self._create_lambda_function(
            function_id="Api",
            handler="service.handlers.api.handler",
            description="Tweet CRUD API backed by DynamoDB",
        )

        # Create, update and delete all write to the table
        self.table.grant_read_write_data(self.api_function)

        self.http_api = self._create_http_api()

        self._add_nag_suppressions()

    def _create_table(self) -> dynamodb.Table:
        """Create the DynamoDB table."""
        return dynamodb.Table(
            self,
            "Table",
            table_name=f"{self.table_name}-{self.stage}",
            partition_key=dynamodb.Attribute(
                name=constants.PARTITION_KEY,
                type=dynamodb.AttributeType.STRING,
            ),
            sort_key=dynamodb.Attribute(
                name=constants.SORT_KEY,
                type=dynamodb.AttributeType.STRING,
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.DESTROY if self.stage == "dev" else RemovalPolicy.RETAIN,
            point_in_time_recovery=True,
        )

    def _create_layer(self) -> PythonLayerVersion:
        """Create Lambda layer with shared dependencies."""
        return PythonLayerVersion(
            self,
            "CommonLayer",
            entry=self.layer_code_path,
            compatible_runtimes=[lambda_.Runtime.PYTHON_3_13],
            compatible_architectures=[lambda_.Architecture.X86_64],
            removal_policy=RemovalPolicy.DESTROY,
            description="Common layer with aws-lambda-powertools and shared dependencies",
        )

    def _create_lambda_role(self) -> iam.Role:
        """Create IAM role for the Lambda function."""
        role = iam.Role(
            self,
            "LambdaRole",
            assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name(f"service-role/{constants.LAMBDA_BASIC_EXECUTION_ROLE}")
            ],
        )

        # Add X-Ray tracing permissions
        role.add_to_policy(
            iam.PolicyStatement(
                actions=[
                    "xray:PutTraceSegments",
                    "xray:PutTelemetryRecords",
                ],
                resources=["*"],
            )
        )

        return role

    def _create_lambda_function(
        self,
        function_id: str,
        handler: str,
        description: str,
    ) -> lambda_.Function:
        """Create a Lambda function with common configuration."""

        log_group = logs.LogGroup(
            self,
            f"{function_id}LogGroup",
            retention=logs.RetentionDays.ONE_WEEK if self.stage == "dev" else logs.RetentionDays.ONE_MONTH,
            removal_policy=RemovalPolicy.DESTROY,
        )

        return lambda_.Function(
            self,
            function_id,
            function_name=f"{self.table_name}-{function_id.lower()}-{self.stage}",
            runtime=lambda_.Runtime.PYTHON_3_13,
            architecture=lambda_.Architecture.X86_64,
            handler=handler,
            code=lambda_.Code.from_asset(self.service_code_path),
            timeout=Duration.seconds(constants.LAMBDA_TIMEOUT),
            memory_size=constants.LAMBDA_MEMORY_SIZE,
            layers=[self.layer],
            role=self.lambda_role,
            log_group=log_group,
            environment={
                constants.TABLE_NAME_ENV_VAR: self.table.table_name,
                constants.API_PREFIX_ENV_VAR: constants.API_PREFIX,
                constants.RESOURCE_NAME_ENV_VAR: constants.RESOURCE_NAME,
                constants.POWERTOOLS_SERVICE_NAME: constants.SERVICE_NAME,
                constants.POWERTOOLS_LOG_LEVEL: "DEBUG" if self.stage == "dev" else "INFO",
                "STAGE": self.stage,
            },
            tracing=lambda_.Tracing.ACTIVE,
            logging_format=lambda_.LoggingFormat.JSON,
            description=description,
        )

    def _create_http_api(self) -> apigwv2.HttpApi:
        """Create the HTTP API that forwards every /api/* request to the function."""
        http_api = apigwv2.HttpApi(
            self,
            "HttpApi",
            api_name=f"{self.table_name}-api-{self.stage}",
            description="Tweet CRUD API",
        )
        http_api.add_routes(
            path=f"/{constants.API_PREFIX}/{{proxy+}}",
            methods=[apigwv2.HttpMethod.ANY],
            integration=HttpLambdaIntegration("ApiIntegration", self.api_function),
        )
        return http_api

    def _add_nag_suppressions(self) -> None:
        """Add cdk-nag suppressions for expected security findings."""
        NagSuppressions.add_resource_suppressions(
            self.lambda_role,
            suppressions=[
                {
                    "id": "AwsSolutions-IAM4",
                    "reason": "Using AWS managed policy for Lambda basic execution role.",
                },
                {
                    "id": "AwsSolutions-IAM5",
                    "reason": "X-Ray tracing requires wildcard permissions.",
                },
            ],
            apply_to_children=True,
        )

        NagSuppressions.add_resource_suppressions(
            self.api_function,
            suppressions=[
                {
                    "id": "AwsSolutions-L1",
                    "reason": "Using Python 3.13 which is the latest supported runtime.",
                },
            ],
        )

        NagSuppressions.add_resource_suppressions(
            self.http_api,
            suppressions=[
                {
                    "id": "AwsSolutions-APIG1",
                    "reason": "Request logging is done by the Lambda function.",
                },
                {
                    "id": "AwsSolutions-APIG4",
                    "reason": "Public API for the tutorial; no authorizer.",
                },
            ],
            apply_to_children=True,
        )
