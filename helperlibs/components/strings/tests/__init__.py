"""
Strings component tests.
"""
