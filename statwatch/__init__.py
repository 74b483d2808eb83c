"""
Statwatch - polls a server statistics endpoint and prints health warnings
"""

__version__ = "1.0.0"
