"""Turn a ``module:attribute`` string into an ``App``."""

import importlib

from bookshelf.app import App


def resolve_app(target: str) -> App:
    """Import *target* and return the App it names.

    The attribute defaults to ``app``. A callable that is not itself an
    App is a factory and is called without arguments.

    Raises ``ModuleNotFoundError`` or ``AttributeError`` for a target that
    does not exist, and ``TypeError`` when the factory fails or the
    result is not an App.
    """
    module_name, _, attribute = target.partition(":")
    obj = getattr(importlib.import_module(module_name), attribute or "app")

    if callable(obj) and not isinstance(obj, App):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"App factory {target!r} failed: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, App):
        msg = f"{target!r} is a {type(obj).__name__}, not a bookshelf.App instance"
        raise TypeError(msg)
    return obj
