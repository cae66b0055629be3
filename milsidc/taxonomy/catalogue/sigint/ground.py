"""
Signals intelligence ground track function ids.
"""

__classification__ = "UNCLASSIFIED"

CODING_SCHEME = 'I'
BATTLE_DIMENSION = 'G'

FUNCTION_IDS = (
    ('------', 'Ground track'),
    ('S-----', 'Signal intercept'),
    ('SC----', 'Communications'),
    ('SCC---', 'Cellular/mobile'),
    ('SCO---', 'Omni-line of sight (LOS)'),
    ('SCP---', 'Point-to-point line of sight (LOS)'),
    ('SCS---', 'Satellite uplink'),
    ('SCT---', 'Tropospheric scatter'),
    ('SR----', 'Radar'),
    ('SRAT--', 'Air traffic control'),
    ('SRAA--', 'Anti-aircraft fire control'),
    ('SRB---', 'Battlefield surveillance'),
    ('SRCS--', 'Coastal surveillance'),
    ('SRCA--', 'Controlled approach'),
    ('SRD---', 'Data transmission'),
    ('SRE---', 'Early warning'),
    ('SRF---', 'Fire control'),
    ('SRH---', 'Height finding'),
    ('SRI---', 'Identification, friend or foe (interrogator)'),
    ('SRMM--', 'Meteorological (military)'),
    ('SRMA--', 'Missile acquisition'),
    ('SRMF--', 'Missile fuzing'),
    ('SRMG--', 'Missile guidance'),
    ('SRMT--', 'Missile tracking'),
    ('SRS---', 'Search'),
    ('SRTA--', 'Target acquisition'),
    ('SRTI--', 'Target illuminator'),
    ('SRTT--', 'Target tracking'),
    ('SRU---', 'Unknown'),
    ('SRW---', 'Weather (civilian)'),
)
