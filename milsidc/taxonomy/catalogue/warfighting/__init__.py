"""
Warfighting (coding scheme `S`) function ids, per battle dimension.
"""

__classification__ = "UNCLASSIFIED"
