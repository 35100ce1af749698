"""Interactive confirm/text prompts.

Both prompts read from stdin via ``input()``. ``confirm`` honours the
configured assume-yes environment variable so scripted runs can skip it.
"""
from __future__ import annotations

import logging
import os
from typing import Callable, Optional

from appship.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _cli_config():
    from appship.core.config.domains.cli import CliConfig

    return CliConfig()


def confirm(message: str, default: Optional[bool] = None) -> bool:
    """Ask a yes/no question.

    Args:
        message: The confirmation prompt message
        default: Answer used when the operator just presses Enter; falls back
            to ``cli.confirm.default``

    Returns:
        True if the operator confirms, False otherwise
    """
    cfg = _cli_config()
    effective_default = cfg.confirm_default if default is None else bool(default)

    assume_env = cfg.assume_yes_env
    if assume_env and os.environ.get(assume_env):
        print(message)
        logger.info("confirm auto-accepted via %s: %s", assume_env, message)
        return True

    suffix = "[Y/n]" if effective_default else "[y/N]"
    try:
        resp = input(f"{message} {suffix} ").strip().lower()
    except EOFError:
        resp = ""

    if resp in ("y", "yes"):
        return True
    if resp in ("n", "no"):
        return False
    return effective_default


def _not_empty(value: str) -> bool:
    return value != ""


def prompt_text(
    message: str,
    *,
    initial: str = "",
    validate: Callable[[str], bool] = _not_empty,
    invalid_message: str = "A value is required.",
) -> str:
    """Ask for a line of text.

    Pressing Enter accepts ``initial``. Answers failing ``validate`` are
    re-asked up to ``cli.prompts.max_attempts`` times.

    Raises:
        ValidationError: When no valid answer was given.
    """
    attempts = _cli_config().prompt_max_attempts
    suffix = f" ({initial})" if initial else ""

    for _ in range(attempts):
        try:
            raw = input(f"{message}{suffix} ")
        except EOFError:
            raw = ""
        answer = raw.strip() or initial
        if validate(answer):
            return answer
        print(invalid_message)

    raise ValidationError(invalid_message, context={"prompt": message, "attempts": attempts})


__all__ = ["confirm", "prompt_text"]
