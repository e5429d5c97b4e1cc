"""
Core numerical primitives and contracts.

Precision utilities, the domain-violation channel and JSON Schema
contracts shared by the special functions, samplers and distributions.
"""
