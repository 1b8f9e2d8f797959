"""Domain values for catr.

Why here:
- Pure data structures (Pydantic v2 + enums) with no I/O and no CLI.
- Shared by the CLI resolver and the emitter service without cycles.
"""
