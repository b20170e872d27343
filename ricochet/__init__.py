"""
Ricochet solver: optimal sliding-piece puzzle search.
"""
