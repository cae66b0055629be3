"""
Signals intelligence sea surface track function ids.
"""

__classification__ = "UNCLASSIFIED"

CODING_SCHEME = 'I'
BATTLE_DIMENSION = 'S'

FUNCTION_IDS = (
    ('------', 'Sea surface track'),
    ('S-----', 'Signal intercept'),
    ('SC----', 'Communications'),
    ('SCC---', 'Cellular/mobile'),
    ('SCO---', 'Omni-line of sight (LOS)'),
    ('SCP---', 'Point-to-point line of sight (LOS)'),
    ('SCS---', 'Satellite uplink'),
    ('SR----', 'Radar'),
    ('SRAT--', 'Air traffic control'),
    ('SRC---', 'Controlled intercept'),
    ('SRD---', 'Data transmission'),
    ('SRE---', 'Early warning'),
    ('SRF---', 'Fire control'),
    ('SRH---', 'Height finding'),
    ('SRI---', 'Identification, friend or foe (interrogator)'),
    ('SRMA--', 'Missile acquisition'),
    ('SRMF--', 'Missile fuzing'),
    ('SRMG--', 'Missile guidance'),
    ('SRMT--', 'Missile tracking'),
    ('SRS---', 'Surface search'),
    ('SRTA--', 'Target acquisition'),
    ('SRTI--', 'Target illuminator'),
    ('SRTT--', 'Target tracking'),
    ('SRU---', 'Unknown'),
)
