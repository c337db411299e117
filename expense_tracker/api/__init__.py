"""
HTTP presentation layer
"""
