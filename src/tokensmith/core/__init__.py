"""
Core token handling: parsing, the normalized IR, loading and configuration.
"""
