"""
Service layer for message handling.

This package contains service classes that run the parser on incoming
chat messages and decide what the sender is told about the outcome.
"""
