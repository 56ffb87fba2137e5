"""
External integrations (storage backends).
"""
