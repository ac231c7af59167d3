"""idleview - settings and context backend for an ambient idle display."""

__version__ = "0.1.0"
