"""
HTTP service for the workflow engine.
"""
