"""Interactive terminal prompts."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import questionary
from questionary import Style

from monobump.versioning.selection import (
    CUSTOM,
    enumerate_candidates,
    resolve_choice,
    validate_custom_version,
)


def get_style() -> Style:
    """
    Provide the Style used for interactive prompts.

    Returns:
        style (Style): A Style configured with color and attribute mappings for prompt elements.
    """
    return Style(
        [
            ("qmark", "fg:#673ab7 bold"),  # Purple question mark
            ("question", "bold"),
            ("answer", "fg:#2196f3 bold"),
            ("pointer", "fg:#673ab7 bold"),
            ("highlighted", "fg:#673ab7 bold"),
            ("selected", "fg:#cc5454"),
            ("instruction", "fg:#888888"),
        ]
    )


def _safe_ask(fn: Callable[..., Any], *args: Any, default: Any = None, **kwargs: Any) -> Any:
    """
    Invoke a questionary prompt and normalize cancellation.

    Parameters:
        fn: The questionary prompt factory (for example `questionary.select`).
        *args: Positional arguments forwarded to `fn`.
        default: Value returned when the user cancels (Ctrl-C / Ctrl-D) or the prompt returns `None`.
        **kwargs: Keyword arguments forwarded to `fn`.

    Returns:
        The prompt's answer, or `default` if the prompt was cancelled.
    """
    try:
        res = fn(*args, **kwargs).ask()
    except (KeyboardInterrupt, EOFError):
        return default

    return res if res is not None else default


def confirm(message: str, *, default: bool = False) -> bool:
    """Ask a yes/no question. Cancelling counts as "no"."""
    answer = _safe_ask(
        lambda: questionary.confirm(message, default=default, style=get_style()),
        default=False,
    )
    return bool(answer)


def confirm_changelog() -> bool:
    """Ask the operator to review the regenerated changelog."""
    return confirm("Check the content of the changelog. Is it correct?")


def select_new_version(old_version: str) -> str | None:
    """Let the operator pick the next version.

    Offers the candidate increments of ``old_version`` plus a custom entry.
    A custom version is re-prompted until it is a valid semantic version.

    Args:
        old_version: Current project version.

    Returns:
        The confirmed version, or None if the operator cancelled or did not confirm.
    """
    candidates = enumerate_candidates(old_version)

    choices = [
        questionary.Choice(title=f"{release.value} ({version})", value=release.value)
        for release, version in candidates.items()
    ]
    choices.append(questionary.Choice(title="Custom", value=CUSTOM))

    choice = _safe_ask(
        questionary.select,
        "Select new version",
        choices=choices,
        style=get_style(),
        use_indicator=True,
    )
    if choice is None:
        return None

    custom = None
    if choice == CUSTOM:
        custom = _safe_ask(
            questionary.text,
            "Enter new custom version",
            validate=validate_custom_version,
            style=get_style(),
        )
        if custom is None:
            return None

    new_version = resolve_choice(candidates, choice, custom)
    if not confirm(f"Confirm new version: {new_version}"):
        return None
    return new_version
