"""type-reach: find the Rust types that transitively contain a seed type."""

__version__ = "0.1.0"
