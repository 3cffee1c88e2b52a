"""
Core value model, numerical primitives, and serialization contracts.

Everything here is pure and independent of I/O.
"""
