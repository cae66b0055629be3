"""
Signals intelligence air track function ids.
"""

__classification__ = "UNCLASSIFIED"

CODING_SCHEME = 'I'
BATTLE_DIMENSION = 'A'

FUNCTION_IDS = (
    ('------', 'Air track'),
    ('S-----', 'Signal intercept'),
    ('SC----', 'Communications'),
    ('SCC---', 'Cellular/mobile'),
    ('SCO---', 'Omni-line of sight (LOS)'),
    ('SCP---', 'Point-to-point line of sight (LOS)'),
    ('SCS---', 'Satellite uplink'),
    ('SR----', 'Radar'),
    ('SRAI--', 'Airborne intercept'),
    ('SRAS--', 'Airborne search and bombing'),
    ('SRC---', 'Controlled intercept'),
    ('SRD---', 'Data transmission'),
    ('SRE---', 'Early warning'),
    ('SRF---', 'Fire control'),
    ('SRI---', 'Identification, friend or foe (interrogator)'),
    ('SRMA--', 'Missile acquisition'),
    ('SRMD--', 'Missile downlink'),
    ('SRMG--', 'Missile guidance'),
    ('SRMT--', 'Missile tracking'),
    ('SRMF--', 'Missile fuzing'),
    ('SRTI--', 'Target illuminator'),
    ('SRTA--', 'Target acquisition'),
    ('SRTT--', 'Target tracking'),
    ('SRU---', 'Unknown'),
)
