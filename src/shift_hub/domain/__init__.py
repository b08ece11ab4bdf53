"""
Domain layer for ShiftHub.
"""
