"""
shopify_theme_setup.prompts - Overwrite Confirmation
====================================================

The setup run asks at most one question: whether to overwrite
configuration files that already exist. The question is asked through a
``Confirm`` callable so tests can supply the answer directly.

On an interactive terminal the question is shown with questionary. When
input is piped, a single line is read and only ``y``/``yes`` (any case,
surrounding whitespace ignored) counts as agreement. An empty line, end of
input or a cancelled prompt all mean "no".
"""

from __future__ import annotations

import sys
from collections.abc import Callable

import questionary

from shopify_theme_setup.output import console


Confirm = Callable[[str], bool]

AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})


def is_affirmative(answer: str | None) -> bool:
    """
    Interpret a typed answer to a (y/N) question.

    Examples
    --------
    >>> is_affirmative(" Yes ")
    True
    >>> is_affirmative("")
    False
    """
    if answer is None:
        return False
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def console_confirm(message: str) -> bool:
    """
    Ask ``message`` on the console, defaulting to "no".

    Parameters
    ----------
    message : str
        The question, without a (y/N) suffix.

    Returns
    -------
    bool
        True only if the user explicitly agreed.
    """
    if sys.stdin.isatty() and sys.stdout.isatty():
        # questionary returns None on Ctrl-C
        return bool(questionary.confirm(message, default=False).ask())

    try:
        answer = console.input(f"\n{message} (y/N) ")
    except EOFError:
        console.print()
        return False
    return is_affirmative(answer)
