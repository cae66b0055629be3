"""
Signals intelligence subsurface track function ids.
"""

__classification__ = "UNCLASSIFIED"

CODING_SCHEME = 'I'
BATTLE_DIMENSION = 'U'

FUNCTION_IDS = (
    ('------', 'Subsurface track'),
    ('S-----', 'Signal intercept'),
    ('SC----', 'Communications'),
    ('SCO---', 'Omni-line of sight (LOS)'),
    ('SCP---', 'Point-to-point line of sight (LOS)'),
    ('SCS---', 'Satellite uplink'),
    ('SR----', 'Radar'),
    ('SRD---', 'Data transmission'),
    ('SRE---', 'Early warning'),
    ('SRM---', 'Multifunction'),
    ('SRS---', 'Surface search'),
    ('SRU---', 'Unknown'),
)
