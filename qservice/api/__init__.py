"""
REST transport for the post service.
"""
