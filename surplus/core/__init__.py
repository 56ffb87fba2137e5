"""
Core Module

Domain building blocks, shared interfaces and utilities. The dependency
container lives in ``surplus.core.container`` and is imported from there.
"""
