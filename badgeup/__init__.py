"""Insert crate badges under a README title."""

__version__ = "0.1.0"
