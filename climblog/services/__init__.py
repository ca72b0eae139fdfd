"""
Climb log storage services.
"""
