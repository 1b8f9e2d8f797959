"""Core interfaces/abstractions.

Why:
- Defines the contracts (Protocol) that concrete adapters implement.
- The core depends on abstractions, never on file or stdin handles directly.
"""
