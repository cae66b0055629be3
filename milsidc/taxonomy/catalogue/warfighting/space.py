"""
Warfighting space track function ids.
"""

__classification__ = "UNCLASSIFIED"

CODING_SCHEME = 'S'
BATTLE_DIMENSION = 'P'

FUNCTION_IDS = (
    ('------', 'Space track'),
    ('S-----', 'Satellite'),
    ('V-----', 'Crewed space vehicle'),
    ('T-----', 'Space station'),
    ('L-----', 'Space launch vehicle'),
)
