"""Human-readable locations for document nodes."""


class LocationFormatter:
    """Turns a node's JSON pointer into a dotted path.

    ``/paths/~1users/get`` becomes ``paths./users.get``. Nodes without a
    pointer get the caller's fallback, usually made with :meth:`build`.
    """

    def format(self, node, fallback: str = '') -> str:
        pointer = getattr(node, 'pointer', None)
        if pointer is None:
            return fallback
        readable = pointer.lstrip('/').replace('/', '.')
        readable = readable.replace('~1', '/').replace('~0', '~')
        return readable or 'root'

    def build(self, *parts) -> str:
        return '.'.join(str(p) for p in parts if p)
