"""
LLM provider package.
"""
