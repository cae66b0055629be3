"""
Signals intelligence (coding scheme `I`) function ids, per battle dimension.
"""

__classification__ = "UNCLASSIFIED"
