"""
Core configuration and storage primitives
"""
