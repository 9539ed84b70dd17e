"""
Adapters for third-party libraries used behind component ports.
"""
