"""Pure domain logic: path strategies, activation policy, release token.

Nothing here does I/O beyond reading the release token from the
environment, so it can be reused by the CLI and by host pipelines alike.
"""
__all__ = ["paths", "policy", "release"]
