"""CDK stacks for the dice roll service."""
from .api_stack import DiceApiStack
from .base_stack import DiceBaseStack

__all__ = ["DiceBaseStack", "DiceApiStack"]
