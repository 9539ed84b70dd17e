"""
Core shared resources.

Leaf modules only: nothing in here imports from components or adapters.
"""
