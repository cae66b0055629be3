"""
Warfighting subsurface track function ids.
"""

__classification__ = "UNCLASSIFIED"

CODING_SCHEME = 'S'
BATTLE_DIMENSION = 'U'

FUNCTION_IDS = (
    ('------', 'Subsurface track'),
    ('S-----', 'Submarine'),
    ('SF----', 'Submarine, surfaced'),
    ('SB----', 'Submarine, snorkeling'),
    ('SR----', 'Submarine, bottomed'),
    ('SX----', 'Other submersible'),
    ('SN----', 'Nonsubmarine'),
    ('SO----', 'Submarine, other'),
    ('SU----', 'Unmanned underwater vehicle (UUV)'),
    ('SNF---', 'Submarine, nuclear propulsion'),
    ('SNA---', 'Submarine, nuclear attack'),
    ('SNM---', 'Submarine, nuclear missile (type unknown)'),
    ('SNG---', 'Submarine, nuclear guided missile (SSGN)'),
    ('SNB---', 'Submarine, nuclear ballistic missile (SSBN)'),
    ('SC----', 'Submarine, conventional propulsion'),
    ('SCA---', 'Submarine, conventional attack'),
    ('SCM---', 'Submarine, conventional missile (type unknown)'),
    ('SCG---', 'Submarine, conventional guided missile (SSG)'),
    ('SCB---', 'Submarine, conventional ballistic missile'),
    ('SS----', 'Station'),
    ('SSA---', 'ASW submarine'),
    ('W-----', 'Underwater weapon'),
    ('WT----', 'Torpedo'),
    ('WM----', 'Sea mine'),
    ('WMD---', 'Sea mine, dealt'),
    ('WMG---', 'Sea mine, ground'),
    ('WMGD--', 'Sea mine, ground, dealt'),
    ('WMGX--', 'Sea mine, ground, exercise'),
    ('WMGE--', 'Sea mine, ground, mine-like echo'),
    ('WMGF--', 'Sea mine, ground, fused'),
    ('WMGC--', 'Sea mine, ground, mine-like contact'),
    ('WMGR--', 'Sea mine, ground, rising'),
    ('WMM---', 'Sea mine, moored'),
    ('WMMD--', 'Sea mine, moored, dealt'),
    ('WMMX--', 'Sea mine, moored, exercise'),
    ('WMME--', 'Sea mine, moored, mine-like echo'),
    ('WMF---', 'Sea mine, floating'),
    ('WMFD--', 'Sea mine, floating, dealt'),
    ('WMFX--', 'Sea mine, floating, exercise'),
    ('WMFE--', 'Sea mine, floating, mine-like echo'),
    ('WMO---', 'Sea mine, in other position'),
    ('WMOD--', 'Sea mine, in other position, dealt'),
    ('WMX---', 'Sea mine, exercise'),
    ('WME---', 'Sea mine, mine-like echo'),
    ('WMA---', 'Sea mine, mine anchor'),
    ('WMC---', 'Sea mine, mine-like contact'),
    ('WMR---', 'Sea mine, rising'),
    ('WD----', 'Underwater decoy'),
    ('WDM---', 'Sea mine decoy'),
    ('WDMG--', 'Sea mine decoy, ground'),
    ('WDMM--', 'Sea mine decoy, moored'),
    ('N-----', 'Non-submarine'),
    ('ND----', 'Diver'),
    ('E-----', 'Environmental report location'),
    ('V-----', 'Dive report location'),
    ('X-----', 'Non-military'),
)
