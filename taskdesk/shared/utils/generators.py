"""Primary key generation. Row ids are CUID2 strings, created client-side."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new CUID2 id for an application or task row."""
    return str(_next_cuid())
