"""
Business domains.
"""
