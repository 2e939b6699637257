"""
AIMLRelay: streams AI/ML API chat answers as server-sent events.
"""

__version__ = "0.1.0"
