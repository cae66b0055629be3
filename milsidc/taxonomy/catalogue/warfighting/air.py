"""
Warfighting air track function ids.
"""

__classification__ = "UNCLASSIFIED"

CODING_SCHEME = 'S'
BATTLE_DIMENSION = 'A'

FUNCTION_IDS = (
    ('------', 'Air track'),
    # military
    ('M-----', 'Military'),
    ('MF----', 'Fixed wing'),
    ('MFB---', 'Bomber'),
    ('MFF---', 'Fighter'),
    ('MFFI--', 'Interceptor'),
    ('MFT---', 'Trainer'),
    ('MFA---', 'Attack/strike'),
    ('MFL---', 'VSTOL'),
    ('MFK---', 'Tanker'),
    ('MFKB--', 'Tanker, boom-only'),
    ('MFKD--', 'Tanker, drogue-only'),
    ('MFC---', 'Cargo airlift (transport)'),
    ('MFCL--', 'Cargo airlift (light)'),
    ('MFCM--', 'Cargo airlift (medium)'),
    ('MFCH--', 'Cargo airlift (heavy)'),
    ('MFJ---', 'Electronic countermeasures (ECM/jammer)'),
    ('MFO---', 'Medevac'),
    ('MFR---', 'Reconnaissance'),
    ('MFRW--', 'Airborne early warning (AEW)'),
    ('MFRZ--', 'Electronic surveillance measures'),
    ('MFRX--', 'Photographic'),
    ('MFP---', 'Patrol'),
    ('MFPN--', 'Anti-submarine warfare (carrier based)'),
    ('MFPM--', 'Mine countermeasures'),
    ('MFU---', 'Utility'),
    ('MFUL--', 'Utility (light)'),
    ('MFUM--', 'Utility (medium)'),
    ('MFUH--', 'Utility (heavy)'),
    ('MFY---', 'Communications (C3I)'),
    ('MFH---', 'Combat search and rescue (CSAR)'),
    ('MFD---', 'Airborne command post (C2)'),
    ('MFQ---', 'Drone (RPV/UAV)'),
    ('MFQA--', 'Drone, attack/strike'),
    ('MFQB--', 'Drone, bomber'),
    ('MFQC--', 'Drone, cargo airlift (transport)'),
    ('MFQD--', 'Drone, airborne command post (C2)'),
    ('MFQF--', 'Drone, fighter'),
    ('MFQH--', 'Drone, combat search and rescue (CSAR)'),
    ('MFQJ--', 'Drone, electronic countermeasures (ECM/jammer)'),
    ('MFQK--', 'Drone, tanker'),
    ('MFQL--', 'Drone, VSTOL'),
    ('MFQM--', 'Drone, special operations forces'),
    ('MFQI--', 'Drone, mine countermeasures'),
    ('MFQN--', 'Drone, anti-submarine warfare'),
    ('MFQP--', 'Drone, patrol'),
    ('MFQR--', 'Drone, reconnaissance'),
    ('MFQRW-', 'Drone, airborne early warning (AEW)'),
    ('MFQRZ-', 'Drone, electronic surveillance measures'),
    ('MFQRX-', 'Drone, photographic'),
    ('MFQS--', 'Drone, SOF'),
    ('MFQT--', 'Drone, trainer'),
    ('MFQU--', 'Drone, utility'),
    ('MFQY--', 'Drone, communications (C3I)'),
    ('MFQO--', 'Drone, medevac'),
    ('MFS---', 'Anti-surface warfare/ASW'),
    ('MFM---', 'Special operations forces'),
    ('MH----', 'Rotary wing'),
    ('MHA---', 'Attack'),
    ('MHS---', 'Anti-submarine warfare/MPA'),
    ('MHU---', 'Utility'),
    ('MHUL--', 'Utility (light)'),
    ('MHUM--', 'Utility (medium)'),
    ('MHUH--', 'Utility (heavy)'),
    ('MHI---', 'Mine countermeasures'),
    ('MHH---', 'Combat search and rescue (CSAR)'),
    ('MHR---', 'Reconnaissance'),
    ('MHQ---', 'Drone (RPV/UAV)'),
    ('MHC---', 'Cargo airlift (transport)'),
    ('MHCL--', 'Cargo airlift (light)'),
    ('MHCM--', 'Cargo airlift (medium)'),
    ('MHCH--', 'Cargo airlift (heavy)'),
    ('MHT---', 'Trainer'),
    ('MHO---', 'Medevac'),
    ('MHM---', 'Special operations forces'),
    ('MHD---', 'Airborne command post (C2)'),
    ('MHK---', 'Tanker'),
    ('MHJ---', 'Electronic countermeasures (ECM/jammer)'),
    ('ML----', 'Lighter than air'),
    # weapon
    ('W-----', 'Weapon'),
    ('WM----', 'Missile in flight'),
    ('WMS---', 'Surface/land launched missile'),
    ('WMSS--', 'Surface to surface missile (SSM)'),
    ('WMSA--', 'Surface to air missile (SAM)'),
    ('WMSAF-', 'SAM, fixed site'),
    ('WMSAM-', 'SAM, manpad'),
    ('WMSAO-', 'SAM, mobile'),
    ('WMSU--', 'Surface to subsurface missile'),
    ('WMSB--', 'SAM, anti-ballistic missile'),
    ('WMA---', 'Air launched missile'),
    ('WMAS--', 'Air to surface missile (ASM)'),
    ('WMAA--', 'Air to air missile (AAM)'),
    ('WMAP--', 'Air to space missile'),
    ('WMU---', 'Subsurface to surface missile'),
    ('WMCM--', 'Cruise missile'),
    ('WMB---', 'Ballistic missile'),
    ('WB----', 'Bomb'),
    ('WD----', 'Decoy'),
    # civil
    ('C-----', 'Civil aircraft'),
    ('CF----', 'Civil fixed wing'),
    ('CH----', 'Civil rotary wing'),
    ('CL----', 'Civil lighter than air'),
)
