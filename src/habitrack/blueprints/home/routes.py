"""Liveness route."""

from __future__ import annotations

from flask import jsonify

from . import bp


@bp.get("/")
def index():
    return jsonify({"hello": "world"})
