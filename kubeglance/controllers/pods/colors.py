"""Pod row color classification."""

from __future__ import annotations

from collections.abc import Sequence

from rich.style import Style

from kubeglance.constants.enums import ColorCategory
from kubeglance.constants.screens.pods import COL_STATUS, COL_VALID
from kubeglance.constants.values import (
    STATUS_COMPLETED,
    STATUS_CONTAINER_CREATING,
    STATUS_INITIALIZED,
    STATUS_PENDING,
    STATUS_POD_INITIALIZING,
    STATUS_TERMINATING,
)
from kubeglance.models.core.header import Header
from kubeglance.models.state.app_settings import ColorPalette

# Statuses whose color does not depend on readiness.
_FIXED_CATEGORIES: dict[str, ColorCategory] = {
    STATUS_PENDING: ColorCategory.PENDING,
    STATUS_CONTAINER_CREATING: ColorCategory.CREATING,
    STATUS_POD_INITIALIZING: ColorCategory.CREATING,
    STATUS_INITIALIZED: ColorCategory.HIGHLIGHT,
    STATUS_COMPLETED: ColorCategory.COMPLETED,
    STATUS_TERMINATING: ColorCategory.KILL,
}


def pod_color_category(status: str, happy: bool) -> ColorCategory:
    """Map a pod status to its row color category.

    Running and unrecognized statuses are standard rows, or error rows when
    the readiness predicate reports the pod unhappy.
    """
    status = status.strip()
    if status in _FIXED_CATEGORIES:
        return _FIXED_CATEGORIES[status]
    # Running shares the fallback for any other status.
    return ColorCategory.STANDARD if happy else ColorCategory.ERROR


def is_happy(header: Header, fields: Sequence[str]) -> bool:
    """Default readiness predicate: a row is happy when VALID is empty."""
    index = header.index_of(COL_VALID)
    if index is None or index >= len(fields):
        return True
    return not fields[index].strip()


def row_color_category(header: Header, fields: Sequence[str]) -> ColorCategory | None:
    """Return the color category of a rendered row, or None without a STATUS column."""
    index = header.index_of(COL_STATUS)
    if index is None or index >= len(fields):
        return None
    return pod_color_category(fields[index], is_happy(header, fields))


def pod_row_style(header: Header, fields: Sequence[str], palette: ColorPalette) -> Style:
    """Resolve a rendered row's color through the configured palette."""
    category = row_color_category(header, fields) or ColorCategory.STANDARD
    return Style(color=palette.color_for(category))
