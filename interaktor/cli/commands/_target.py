"""Resolve ``module:ClassName`` targets given on the command line."""

from __future__ import annotations

import importlib

import typer

from interaktor.base import Interaktor


def load_interaktor(target: str) -> type[Interaktor]:
    """Import *target* (``package.module:ClassName``) and return the class.

    Raises
    ------
    typer.BadParameter
        If the target is malformed, cannot be imported, or is not an
        ``Interaktor`` subclass.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise typer.BadParameter(
            f"Expected 'module:ClassName', got {target!r}", param_hint="TARGET"
        )

    try:
        obj = importlib.import_module(module_name)
    except ImportError as exc:
        raise typer.BadParameter(
            f"Cannot import {module_name!r}: {exc}", param_hint="TARGET"
        ) from exc

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise typer.BadParameter(
                f"{module_name!r} has no attribute {attr_path!r}", param_hint="TARGET"
            ) from exc

    if not (isinstance(obj, type) and issubclass(obj, Interaktor)):
        raise typer.BadParameter(
            f"{target!r} is not an Interaktor subclass", param_hint="TARGET"
        )
    return obj
