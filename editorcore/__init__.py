"""Name pool, object registry, components, world, editor layout and console logic."""

__version__ = "0.1.0"