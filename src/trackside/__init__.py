"""
Trackside

Read-only listing services for races and sporting events backed by Postgres.
"""
