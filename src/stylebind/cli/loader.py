"""Resolve ``module:attribute`` references to stylesheet instances."""

from __future__ import annotations

import importlib

import click

from stylebind.sheet import StyleSheet


def load_sheet(reference: str) -> StyleSheet:
    """Import *reference* and return a sheet with every member declared.

    The attribute may be a :class:`StyleSheet` instance or a subclass that
    can be constructed without arguments.
    """
    module_name, sep, attr_name = reference.partition(":")
    if not sep or not module_name or not attr_name:
        raise click.BadParameter(f"expected MODULE:ATTR, got {reference!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise click.ClickException(f"cannot import {module_name!r}: {exc}") from exc

    try:
        target = getattr(module, attr_name)
    except AttributeError as exc:
        raise click.ClickException(f"{module_name!r} has no attribute {attr_name!r}") from exc

    if isinstance(target, type) and issubclass(target, StyleSheet):
        target = target()
    if not isinstance(target, StyleSheet):
        raise click.ClickException(f"{reference!r} is not a StyleSheet")

    target.declare_all()
    return target
