"""Converters usable in a capture segment: ``{id}``, ``{id:int}``, ``{id:float}``.

Each maps to the pattern one path segment must fully match and the type
its text is converted to before it reaches the handler.
"""

CONVERTERS: dict[str, tuple[str, type]] = {
    "str": (r"[^/]+", str),
    "int": (r"[0-9]+", int),
    "float": (r"[0-9]+(?:\.[0-9]+)?", float),
}
