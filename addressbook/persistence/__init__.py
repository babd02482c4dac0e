"""
Address book state containers
"""
