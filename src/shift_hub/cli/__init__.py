"""
Command-line interface for ShiftHub.
"""
