"""
Warfighting sea surface track function ids.
"""

__classification__ = "UNCLASSIFIED"

CODING_SCHEME = 'S'
BATTLE_DIMENSION = 'S'

FUNCTION_IDS = (
    ('------', 'Sea surface track'),
    ('C-----', 'Combatant'),
    ('CL----', 'Line'),
    ('CLCV--', 'Carrier'),
    ('CLBB--', 'Battleship'),
    ('CLCC--', 'Cruiser'),
    ('CLDD--', 'Destroyer'),
    ('CLFF--', 'Frigate/corvette'),
    ('CLLL--', 'Littoral combatant ship'),
    ('CA----', 'Amphibious warfare ship'),
    ('CALA--', 'Assault vessel'),
    ('CALS--', 'Landing ship'),
    ('CALSM-', 'Landing ship, medium'),
    ('CALST-', 'Landing ship, tank'),
    ('CALC--', 'Landing craft'),
    ('CM----', 'Mine warfare vessel'),
    ('CMML--', 'Minelayer'),
    ('CMMS--', 'Minesweeper'),
    ('CMMH--', 'Minehunter'),
    ('CMMA--', 'Mine countermeasures support ship'),
    ('CMMD--', 'Mine countermeasures drone'),
    ('CP----', 'Patrol'),
    ('CPSB--', 'Patrol, anti-submarine warfare'),
    ('CPSU--', 'Patrol, anti-surface warfare'),
    ('CPSUM-', 'Patrol, guided missile'),
    ('CPSUT-', 'Patrol, torpedo'),
    ('CPSUG-', 'Patrol, gun'),
    ('CH----', 'Hovercraft'),
    ('S-----', 'Station'),
    ('SP----', 'Picket'),
    ('SA----', 'ASW ship'),
    ('G-----', 'Navy group'),
    ('GT----', 'Navy task force'),
    ('GG----', 'Navy task group'),
    ('GU----', 'Navy task unit'),
    ('GC----', 'Convoy'),
    ('N-----', 'Noncombatant'),
    ('NR----', 'Underway replenishment'),
    ('NF----', 'Fleet support'),
    ('NI----', 'Intelligence'),
    ('NS----', 'Service and support harbor'),
    ('NM----', 'Hospital ship'),
    ('NH----', 'Hovercraft'),
    ('NN----', 'Station ship'),
    ('X-----', 'Non-military'),
    ('XM----', 'Merchant ship'),
    ('XMC---', 'Cargo'),
    ('XMR---', 'Roll on/roll off'),
    ('XMO---', 'Oiler/tanker'),
    ('XMTU--', 'Tug'),
    ('XMF---', 'Ferry'),
    ('XMP---', 'Passenger'),
    ('XMH---', 'Hazardous materials (HAZMAT)'),
    ('XMTO--', 'Towing vessel'),
    ('XF----', 'Fishing vessel'),
    ('XFDF--', 'Drifter'),
    ('XFTR--', 'Trawler'),
    ('XFDR--', 'Dredge'),
    ('XL----', 'Law enforcement vessel'),
    ('XH----', 'Hovercraft'),
    ('XR----', 'Leisure craft'),
    ('O-----', 'Own track'),
)
