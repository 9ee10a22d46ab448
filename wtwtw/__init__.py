# wtwtw/__init__.py
"""
WTWTW (What To Watch This Week): picks the best favorite-team game per day.
"""
