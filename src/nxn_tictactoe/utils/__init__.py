"""
Utils module - configuration and game factory.
"""
