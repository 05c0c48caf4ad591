"""
HTTP API for the bank message parser.
"""
