"""API infrastructure stack for the dice roll service.

Contains:
- Roll and interaction Lambda functions
- API Gateway REST API with CORS
- Stage configuration for dev/prod
"""
from aws_cdk import CfnOutput, Duration, RemovalPolicy, Stack
from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_logs as logs
from constructs import Construct

from .base_stack import LAMBDAS_DIR, DiceBaseStack

PROD_ORIGIN = "https://dice.example.com"


class DiceApiStack(Stack):
    """API infrastructure stack with Lambda functions and API Gateway."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        environment: str,
        base_stack: DiceBaseStack,
        **kwargs,
    ) -> None:
        """Initialize API stack.

        Args:
            scope: CDK scope
            construct_id: Stack identifier
            environment: Deployment environment (dev/prod)
            base_stack: Reference to base infrastructure stack
            **kwargs: Additional stack properties
        """
        super().__init__(scope, construct_id, **kwargs)

        self.deploy_env = environment
        self.prefix = f"dice-{environment}"
        self.base_stack = base_stack

        # Create resources
        self.roll_function = self._create_function("roll", "roll.handler.lambda_handler")
        self.interaction_function = self._create_function(
            "interaction", "interaction.handler.lambda_handler"
        )
        self.api = self._create_api()

        # Export outputs
        self._create_outputs()

    def _create_function(self, name: str, handler: str) -> lambda_.Function:
        """Create a Lambda function sharing the base layer."""
        log_group = logs.LogGroup(
            self,
            f"{name.title()}Logs",
            log_group_name=f"/aws/lambda/{self.prefix}-{name}",
            retention=logs.RetentionDays.ONE_WEEK,
            removal_policy=RemovalPolicy.DESTROY,
        )

        environment = {
            "ENVIRONMENT": self.deploy_env,
            "POWERTOOLS_SERVICE_NAME": "dice-roll",
            "POWERTOOLS_METRICS_NAMESPACE": "DiceRoll",
            "POWERTOOLS_LOG_LEVEL": "DEBUG" if self.deploy_env == "dev" else "INFO",
        }
        if self.deploy_env == "prod":
            environment["ALLOWED_ORIGIN"] = PROD_ORIGIN

        return lambda_.Function(
            self,
            f"{name.title()}Function",
            function_name=f"{self.prefix}-{name}",
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler=handler,
            code=lambda_.Code.from_asset(
                str(LAMBDAS_DIR),
                exclude=["tests", "shared", "requirements.txt", "**/__pycache__"],
            ),
            layers=[self.base_stack.shared_layer],
            environment=environment,
            timeout=Duration.seconds(10),
            memory_size=256,
            tracing=lambda_.Tracing.ACTIVE,
            log_group=log_group,
        )

    def _create_api(self) -> apigw.RestApi:
        """Create API Gateway REST API with CORS configuration."""
        # Determine CORS origins based on environment
        cors_origins = (
            [PROD_ORIGIN]
            if self.deploy_env == "prod"
            else apigw.Cors.ALL_ORIGINS
        )

        api = apigw.RestApi(
            self,
            "Api",
            rest_api_name=f"{self.prefix}-api",
            description="Dice roll API",
            deploy_options=apigw.StageOptions(
                stage_name=self.deploy_env,
                throttling_rate_limit=100,
                throttling_burst_limit=200,
            ),
            default_cors_preflight_options=apigw.CorsOptions(
                allow_origins=cors_origins,
                allow_methods=["POST", "OPTIONS"],
                allow_headers=["Content-Type"],
            ),
        )

        roll_integration = apigw.LambdaIntegration(self.roll_function, proxy=True)
        interaction_integration = apigw.LambdaIntegration(
            self.interaction_function, proxy=True
        )

        # /roll and /roll/notation endpoints
        roll = api.root.add_resource("roll")
        roll.add_method("POST", roll_integration)
        roll.add_resource("notation").add_method("POST", roll_integration)

        # /interactions endpoint
        interactions = api.root.add_resource("interactions")
        interactions.add_method("POST", interaction_integration)

        return api

    def _create_outputs(self) -> None:
        """Create CloudFormation outputs."""
        CfnOutput(
            self,
            "ApiUrl",
            value=self.api.url,
            description="API Gateway URL",
            export_name=f"{self.prefix}-api-url",
        )

        CfnOutput(
            self,
            "ApiId",
            value=self.api.rest_api_id,
            description="API Gateway ID",
            export_name=f"{self.prefix}-api-id",
        )

        CfnOutput(
            self,
            "RollFunctionArn",
            value=self.roll_function.function_arn,
            description="Roll Lambda function ARN",
            export_name=f"{self.prefix}-roll-function-arn",
        )
