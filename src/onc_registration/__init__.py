"""ONC registration checks for an OpenEMR installation.

This package holds the settings compliance checker, the NPI validator and the
published-endpoint verifier. It is callable from the host application and from
the bundled CLI.
"""

__all__ = [
    "core",
]
