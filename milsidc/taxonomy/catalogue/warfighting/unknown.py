"""
Warfighting function ids for the unknown battle dimension.
"""

__classification__ = "UNCLASSIFIED"

CODING_SCHEME = 'S'
BATTLE_DIMENSION = 'Z'

FUNCTION_IDS = (
    ('------', 'Unknown'),
)
