"""Base infrastructure stack for the dice roll service.

Contains:
- Lambda layer with third-party dependencies and the shared dice package
"""
from pathlib import Path

from aws_cdk import CfnOutput, Stack
from aws_cdk import aws_lambda as lambda_
from constructs import Construct

LAMBDAS_DIR = Path(__file__).resolve().parents[2] / "lambdas"


class DiceBaseStack(Stack):
    """Base infrastructure stack with the shared Lambda layer."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        environment: str = "dev",
        **kwargs,
    ) -> None:
        """Initialize base stack.

        Args:
            scope: CDK scope
            construct_id: Stack identifier
            environment: Deployment environment (dev/prod)
            **kwargs: Additional stack properties
        """
        super().__init__(scope, construct_id, **kwargs)

        self.deploy_env = environment
        self.prefix = f"dice-{environment}"

        # Create resources
        self.shared_layer = self._create_lambda_layer()

        # Export outputs
        self._create_outputs()

    def _create_lambda_layer(self) -> lambda_.LayerVersion:
        """Create Lambda layer for dependencies and shared Python code."""
        return lambda_.LayerVersion(
            self,
            "SharedLayer",
            layer_version_name=f"{self.prefix}-shared",
            code=lambda_.Code.from_asset(
                str(LAMBDAS_DIR),
                bundling={
                    "image": lambda_.Runtime.PYTHON_3_12.bundling_image,
                    "command": [
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python "
                        "&& cp -r shared /asset-output/python/",
                    ],
                },
            ),
            compatible_runtimes=[lambda_.Runtime.PYTHON_3_12],
            description="Shared dice parser, engine and dependencies",
        )

    def _create_outputs(self) -> None:
        """Create CloudFormation outputs."""
        CfnOutput(
            self,
            "SharedLayerArn",
            value=self.shared_layer.layer_version_arn,
            description="Shared Lambda layer ARN",
            export_name=f"{self.prefix}-shared-layer-arn",
        )
