"""
Core value types, arithmetic primitives, and contracts.

Everything here is pure computation over immutable values; nothing
performs I/O except loading the bundled JSON schemas.
"""
