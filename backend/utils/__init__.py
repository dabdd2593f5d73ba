"""
Shared utilities (logging, validation)
"""
