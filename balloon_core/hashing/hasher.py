"""
Primitive Hash Adapter
======================
One call, one primitive invocation, over a sequence of mixed parts.
"""

from typing import Optional

from .. import config
from .encoding import Part, encode_part
from .registry import get_hash_function


class Hasher:
    """
    Hash context bound to a single primitive.

    The primitive is chosen once, at construction, and every call site
    goes through the same instance. Only the name is stored, so a
    Hasher can be pickled into worker processes.

    Usage:
        hasher = Hasher("sha256")
        block = hasher(0, "password", b"salt")
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name or config.HASH_TYPE
        self._constructor = get_hash_function(self.name)
        self.digest_size = self._constructor().digest_size

    def __call__(self, *parts: Part) -> bytes:
        h = self._constructor()
        for part in parts:
            h.update(encode_part(part))
        return h.digest()

    def __getstate__(self):
        return {"name": self.name}

    def __setstate__(self, state):
        self.__init__(state["name"])

    def __eq__(self, other) -> bool:
        return isinstance(other, Hasher) and other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Hasher({self.name!r})"


def default_hasher() -> Hasher:
    """Hasher for the configured HASH_TYPE."""
    return Hasher(config.HASH_TYPE)
