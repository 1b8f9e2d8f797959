"""Core: configuration, domain values, contracts and services."""
