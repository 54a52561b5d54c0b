"""
API utilities.
"""
