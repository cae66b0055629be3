"""
Warfighting special operations forces (SOF) unit function ids.
"""

__classification__ = "UNCLASSIFIED"

CODING_SCHEME = 'S'
BATTLE_DIMENSION = 'F'

FUNCTION_IDS = (
    ('------', 'SOF unit'),
    ('A-----', 'Aviation'),
    ('AF----', 'Fixed wing'),
    ('AFA---', 'Fixed wing, attack'),
    ('AFK---', 'Fixed wing, refuel'),
    ('AFU---', 'Fixed wing, utility'),
    ('AFUL--', 'Fixed wing, utility (light)'),
    ('AFUM--', 'Fixed wing, utility (medium)'),
    ('AFUH--', 'Fixed wing, utility (heavy)'),
    ('AV----', 'V/STOL'),
    ('AH----', 'Rotary wing'),
    ('AHH---', 'Rotary wing, combat search and rescue'),
    ('AHA---', 'Rotary wing, attack'),
    ('AHU---', 'Rotary wing, utility'),
    ('AHUL--', 'Rotary wing, utility (light)'),
    ('AHUM--', 'Rotary wing, utility (medium)'),
    ('AHUH--', 'Rotary wing, utility (heavy)'),
    ('N-----', 'Naval'),
    ('NS----', 'SEAL'),
    ('NU----', 'Underwater demolition team'),
    ('NB----', 'Special boat'),
    ('NN----', 'Special SSNR'),
    ('G-----', 'Ground'),
    ('GS----', 'Special forces'),
    ('GR----', 'Ranger'),
    ('GP----', 'Psychological operations (PSYOP)'),
    ('GPA---', 'PSYOP, fixed wing aviation'),
    ('GC----', 'Civil affairs'),
    ('B-----', 'Support'),
)
