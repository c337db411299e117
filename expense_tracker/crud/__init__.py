"""
Data access for persisted state
"""
