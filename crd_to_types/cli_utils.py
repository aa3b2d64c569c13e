"""
CLI utilities for command line reconstruction and introspection.
"""

from pathlib import Path

import click

PROGRAM_NAME = "crdtotypes"


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context
        return PROGRAM_NAME

    if not cli_args:
        return PROGRAM_NAME

    cmd_parts = [PROGRAM_NAME]

    for param in click_command.params:
        if not isinstance(param, click.Option) or param.name not in cli_args:
            continue

        value = cli_args[param.name]
        if not value or value == param.default:
            continue

        flag = param.opts[0] if param.opts else f"--{param.name}"
        if param.is_flag:
            cmd_parts.append(flag)
            continue

        # Paths are shown by file name only
        if isinstance(value, (str, Path)) and param.type.name in ("path", "file"):
            formatted_value = Path(str(value)).name
        else:
            formatted_value = str(value)
        if " " in formatted_value:
            formatted_value = f"'{formatted_value}'"

        cmd_parts.extend([flag, formatted_value])

    return " ".join(cmd_parts)
