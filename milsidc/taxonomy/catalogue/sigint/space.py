"""
Signals intelligence space track function ids.
"""

__classification__ = "UNCLASSIFIED"

CODING_SCHEME = 'I'
BATTLE_DIMENSION = 'P'

FUNCTION_IDS = (
    ('------', 'Space track'),
    ('S-----', 'Signal intercept'),
    ('SC----', 'Communications'),
    ('SCD---', 'Satellite downlink'),
    ('SR----', 'Radar'),
    ('SRD---', 'Data transmission'),
    ('SRE---', 'Early warning'),
    ('SRI---', 'Identification, friend or foe (interrogator)'),
    ('SRM---', 'Multifunction'),
    ('SRT---', 'Target acquisition'),
    ('SRS---', 'Space'),
    ('SRU---', 'Unknown'),
)
