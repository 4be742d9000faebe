"""Report options using context variables, set once per command invocation."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Context variable for listing every day below a week, month or year
_show_days_var: ContextVar[bool] = ContextVar("show_days", default=False)

# Context variable for listing the parts of each day
_show_parts_var: ContextVar[bool] = ContextVar("show_parts", default=False)

# Context variable for weekday names, part counts, earnings and factors
_verbose_var: ContextVar[bool] = ContextVar("verbose", default=False)


def set_show_days(value: bool) -> None:
    _show_days_var.set(value)


def get_show_days() -> bool:
    return _show_days_var.get()


def set_show_parts(value: bool) -> None:
    _show_parts_var.set(value)


def get_show_parts() -> bool:
    return _show_parts_var.get()


def set_verbose(value: bool) -> None:
    """Set whether reports include earnings and the per factor breakdown.

    Args:
        value: True for the detailed report, False for worked time only
    """
    _verbose_var.set(value)


def get_verbose() -> bool:
    return _verbose_var.get()
