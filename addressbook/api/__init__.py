"""
Address book REST API package
"""
