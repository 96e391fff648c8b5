"""Error raised for graphs, options and callbacks that cannot be used."""


class InvalidInputError(TypeError):
    """Raised when a traversal argument has the wrong shape.

    Only structurally unusable input raises: a graph that is not a list or
    tuple, an unknown option name, or a callback that cannot be called.
    Malformed adjacency entries are coerced instead (see
    ``traversals.options.normalize_graph``).
    """
