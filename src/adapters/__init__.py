"""Adapters: concrete I/O behind the core contracts."""
