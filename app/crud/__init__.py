"""
Owner-scoped data access for customers, vehicles, services and dashboard
statistics. Every function takes the acting user's id; rows owned by someone
else are indistinguishable from missing rows.
"""
