"""URL converters for database row ids."""

from __future__ import annotations

from werkzeug.routing import IntegerConverter

from .forms import INT_MAX


class RowIdConverter(IntegerConverter):
    """``<id:name>``: a non-negative integer that fits a 64-bit INTEGER column.

    Larger values do not match the rule, so they end in the JSON 404 envelope
    instead of reaching the database driver.
    """

    def __init__(self, map, *args, **kwargs) -> None:
        kwargs.setdefault("max", INT_MAX)
        super().__init__(map, *args, **kwargs)


def init_app(app) -> None:
    app.url_map.converters["id"] = RowIdConverter


__all__ = ["RowIdConverter", "init_app"]
