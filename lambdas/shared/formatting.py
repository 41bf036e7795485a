"""Chat-style rendering of resolved dice rolls."""

from .models import RolledGroup, Step


def format_group(group: RolledGroup) -> str:
    """Render one rolled group, e.g. ``(4) + (2) - 1``."""
    text = " + ".join(f"({value})" for value in group.rolls)
    if group.modifier > 0:
        text += f" + {group.modifier}"
    elif group.modifier < 0:
        text += f" - {abs(group.modifier)}"
    return text


def format_step(step: Step) -> str:
    """Render a step as a single display line.

    Args:
        step: Resolved step

    Returns:
        Display string, e.g. ``(4) + (2) + (3) - 2 = 7``
    """
    return f"{' + '.join(format_group(group) for group in step.groups)} = {step.total}"
