#!/usr/bin/env python3
"""CDK app entry point for the dice roll service.

Deploy a given environment with ``cdk deploy -c environment=prod``.
"""
import os

import aws_cdk as cdk

from stacks.api_stack import DiceApiStack
from stacks.base_stack import DiceBaseStack

ENVIRONMENTS = ("dev", "test", "prod")


def build_app(app: cdk.App | None = None) -> cdk.App:
    """Add the base and API stacks for the ``environment`` context to an app.

    Raises:
        ValueError: If the environment context is not a known environment
    """
    if app is None:
        app = cdk.App()
    environment = app.node.try_get_context("environment") or "dev"
    if environment not in ENVIRONMENTS:
        raise ValueError(f"Unknown environment '{environment}', expected one of {ENVIRONMENTS}")

    env = cdk.Environment(
        account=os.environ.get("CDK_DEFAULT_ACCOUNT"),
        region=os.environ.get("CDK_DEFAULT_REGION", "us-east-1"),
    )
    base_stack = DiceBaseStack(app, f"DiceBase-{environment}", environment=environment, env=env)
    DiceApiStack(
        app,
        f"DiceApi-{environment}",
        environment=environment,
        base_stack=base_stack,
        env=env,
    )
    return app


if __name__ == "__main__":
    build_app().synth()
