"""Adapters – concrete log sink backends.

Each adapter lives in its own subpackage and imports its third-party client
lazily, so ``rpc_observability.adapters`` itself has no optional dependencies.
"""
