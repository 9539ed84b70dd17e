"""
Collection component tests.
"""
