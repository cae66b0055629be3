"""
Warfighting ground track function ids - units, equipment and installations.
"""

__classification__ = "UNCLASSIFIED"

CODING_SCHEME = 'S'
BATTLE_DIMENSION = 'G'

FUNCTION_IDS = (
    ('------', 'Ground track'),
    # units
    ('U-----', 'Unit'),
    ('UC----', 'Combat'),
    ('UCD---', 'Air defense'),
    ('UCDS--', 'Short range air defense'),
    ('UCDM--', 'Air defense missile'),
    ('UCDG--', 'Air defense gun unit'),
    ('UCDC--', 'Composite air defense'),
    ('UCDT--', 'Targeting unit'),
    ('UCDO--', 'Theater missile defense unit'),
    ('UCA---', 'Armor'),
    ('UCAT--', 'Armor, track'),
    ('UCATA-', 'Armor, track, airborne'),
    ('UCATW-', 'Armor, track, amphibious'),
    ('UCAW--', 'Armor, wheeled'),
    ('UCAWA-', 'Armor, wheeled, airborne'),
    ('UCAA--', 'Anti-armor'),
    ('UCAAD-', 'Anti-armor, dismounted'),
    ('UCAAL-', 'Anti-armor, light'),
    ('UCAAM-', 'Anti-armor, airborne'),
    ('UCAAS-', 'Anti-armor, air assault'),
    ('UCAAU-', 'Anti-armor, mountain'),
    ('UCAAC-', 'Anti-armor, arctic'),
    ('UCAAA-', 'Anti-armor, armored'),
    ('UCAAO-', 'Anti-armor, motorized'),
    ('UCV---', 'Aviation'),
    ('UCVF--', 'Fixed wing aviation'),
    ('UCVFU-', 'Fixed wing utility'),
    ('UCVFA-', 'Fixed wing attack'),
    ('UCVFR-', 'Fixed wing reconnaissance'),
    ('UCVR--', 'Rotary wing aviation'),
    ('UCVRA-', 'Rotary wing attack'),
    ('UCVRS-', 'Rotary wing scout/reconnaissance'),
    ('UCVRW-', 'Rotary wing anti-submarine warfare'),
    ('UCVRU-', 'Rotary wing utility'),
    ('UCVRM-', 'Rotary wing mine countermeasures'),
    ('UCVC--', 'Composite aviation'),
    ('UCVV--', 'Vertical/short takeoff and landing'),
    ('UCVU--', 'Unmanned aerial vehicle'),
    ('UCVUF-', 'Unmanned aerial vehicle, fixed wing'),
    ('UCVUR-', 'Unmanned aerial vehicle, rotary wing'),
    ('UCI---', 'Infantry'),
    ('UCIL--', 'Infantry, light'),
    ('UCIM--', 'Infantry, motorized'),
    ('UCIO--', 'Infantry, mountain'),
    ('UCIA--', 'Infantry, airborne'),
    ('UCIS--', 'Infantry, air assault'),
    ('UCIZ--', 'Infantry, mechanized'),
    ('UCIN--', 'Infantry, naval'),
    ('UCII--', 'Infantry fighting vehicle'),
    ('UCIC--', 'Infantry, arctic'),
    ('UCE---', 'Engineer'),
    ('UCEC--', 'Combat engineer'),
    ('UCECA-', 'Combat engineer, airborne'),
    ('UCECC-', 'Combat engineer, arctic'),
    ('UCECH-', 'Combat engineer, heavy'),
    ('UCECL-', 'Combat engineer, light (sapper)'),
    ('UCECM-', 'Combat engineer, mechanized (track)'),
    ('UCECO-', 'Combat engineer, mountain'),
    ('UCECR-', 'Combat engineer, recon'),
    ('UCECT-', 'Combat engineer, motorized'),
    ('UCECW-', 'Combat engineer, wheeled'),
    ('UCEN--', 'Construction'),
    ('UCENN-', 'Naval construction'),
    ('UCF---', 'Field artillery'),
    ('UCFH--', 'Howitzer/gun'),
    ('UCFHE-', 'Howitzer/gun, self-propelled'),
    ('UCFHA-', 'Howitzer/gun, airborne'),
    ('UCFHL-', 'Howitzer/gun, light'),
    ('UCFHM-', 'Howitzer/gun, medium'),
    ('UCFHH-', 'Howitzer/gun, heavy'),
    ('UCFR--', 'Rocket'),
    ('UCFRS-', 'Single rocket launcher'),
    ('UCFRM-', 'Multi rocket launcher'),
    ('UCFRMS', 'Multi rocket launcher, self-propelled'),
    ('UCFRMT', 'Multi rocket launcher, truck'),
    ('UCFT--', 'Target acquisition'),
    ('UCFTR-', 'Target acquisition, radar'),
    ('UCFTS-', 'Target acquisition, sound'),
    ('UCFTF-', 'Target acquisition, flash (optical)'),
    ('UCFM--', 'Mortar'),
    ('UCFMS-', 'Mortar, self-propelled (track)'),
    ('UCFMW-', 'Mortar, self-propelled (wheeled)'),
    ('UCFMT-', 'Mortar, towed'),
    ('UCFO--', 'Meteorological'),
    ('UCFS--', 'Survey'),
    ('UCR---', 'Reconnaissance'),
    ('UCRH--', 'Reconnaissance, horse'),
    ('UCRV--', 'Cavalry'),
    ('UCRVA-', 'Cavalry, armored'),
    ('UCRVM-', 'Cavalry, motorized'),
    ('UCRVG-', 'Cavalry, ground'),
    ('UCRVO-', 'Cavalry, air'),
    ('UCRC--', 'Reconnaissance, arctic'),
    ('UCRS--', 'Reconnaissance, air assault'),
    ('UCRA--', 'Reconnaissance, airborne'),
    ('UCRO--', 'Reconnaissance, mountain'),
    ('UCRL--', 'Reconnaissance, light'),
    ('UCRR--', 'Reconnaissance, marine'),
    ('UCRX--', 'Long range surveillance'),
    ('UCM---', 'Missile (surface-surface)'),
    ('UCMT--', 'Missile, tactical'),
    ('UCMS--', 'Missile, strategic'),
    ('UCS---', 'Internal security forces'),
    ('UCSW--', 'Riverine'),
    ('UCSG--', 'Ground'),
    ('UCSGD-', 'Ground, dismounted infantry'),
    ('UCSGM-', 'Ground, mechanized'),
    ('UCSGA-', 'Ground, wheeled mechanized'),
    ('UCSM--', 'Mechanized'),
    ('UCSR--', 'Railroad'),
    ('UCSA--', 'Aviation'),
    # combat support
    ('UU----', 'Combat support'),
    ('UUA---', 'CBRN'),
    ('UUAC--', 'Chemical'),
    ('UUACC-', 'Smoke/decontamination'),
    ('UUACR-', 'Chemical recon'),
    ('UUACS-', 'Chemical smoke'),
    ('UUAN--', 'Nuclear'),
    ('UUAB--', 'Biological'),
    ('UUABR-', 'Biological recon equipped'),
    ('UUAD--', 'Decontamination'),
    ('UUM---', 'Military intelligence'),
    ('UUMA--', 'Aerial exploitation'),
    ('UUMS--', 'Signal intelligence (SIGINT)'),
    ('UUMSE-', 'Electronic warfare'),
    ('UUMC--', 'Counter intelligence'),
    ('UUMR--', 'Surveillance'),
    ('UUMJ--', 'Joint intelligence center'),
    ('UUMO--', 'Operations'),
    ('UUMQ--', 'Interrogation'),
    ('UUMT--', 'Tactical exploitation'),
    ('UUL---', 'Law enforcement unit'),
    ('UULS--', 'Shore patrol'),
    ('UULM--', 'Military police'),
    ('UULC--', 'Civilian law enforcement'),
    ('UULF--', 'Security police (air)'),
    ('UULD--', 'Central intelligence division (CID)'),
    ('UUS---', 'Signal unit'),
    ('UUSA--', 'Area'),
    ('UUSC--', 'Communication configured package'),
    ('UUSO--', 'Command operations'),
    ('UUSF--', 'Forward communications'),
    ('UUSM--', 'Multiple subscriber element'),
    ('UUSR--', 'Radio unit'),
    ('UUSRS-', 'Tactical satellite'),
    ('UUSRT-', 'Teletype center'),
    ('UUSRW-', 'Relay'),
    ('UUSS--', 'Signal support'),
    ('UUSW--', 'Radio relay'),
    ('UUSX--', 'Electronic ranging'),
    ('UUI---', 'Information warfare unit'),
    ('UUP---', 'Landing support'),
    ('UUE---', 'Explosive ordnance disposal'),
    ('UUT---', 'Topographic'),
    # combat service support
    ('US----', 'Combat service support'),
    ('USA---', 'Administrative (admin)'),
    ('USAF--', 'Finance'),
    ('USAJ--', 'Judge advocate general (JAG)'),
    ('USAL--', 'Labor'),
    ('USAM--', 'Morale, welfare, recreation'),
    ('USAO--', 'Personnel services'),
    ('USAP--', 'Postal'),
    ('USAQ--', 'Quartermaster'),
    ('USAR--', 'Religious/chaplain'),
    ('USAS--', 'Public affairs'),
    ('USAT--', 'Mortuary/graves registry'),
    ('USAW--', 'Replacement holding unit'),
    ('USAX--', 'Theater support'),
    ('USM---', 'Medical'),
    ('USMT--', 'Medical treatment facility'),
    ('USMV--', 'Medical, veterinary'),
    ('USMD--', 'Medical, dental'),
    ('USMP--', 'Medical, psychological'),
    ('USMC--', 'Medical, corps'),
    ('USMM--', 'Medical, theater'),
    ('USS---', 'Supply'),
    ('USS1--', 'Supply, class I'),
    ('USS2--', 'Supply, class II'),
    ('USS3--', 'Supply, class III'),
    ('USS3A-', 'Supply, class III aviation'),
    ('USS4--', 'Supply, class IV'),
    ('USS5--', 'Supply, class V'),
    ('USS6--', 'Supply, class VI'),
    ('USS7--', 'Supply, class VII'),
    ('USS8--', 'Supply, class VIII'),
    ('USS9--', 'Supply, class IX'),
    ('USSX--', 'Supply, class X'),
    ('USSL--', 'Supply, laundry/bath'),
    ('USSW--', 'Supply, water'),
    ('USSWP-', 'Supply, water purification'),
    ('UST---', 'Transportation'),
    ('USTM--', 'Movement control center'),
    ('USTR--', 'Railhead'),
    ('USTS--', 'Sea port of debarkation/embarkation'),
    ('USTA--', 'Air port of debarkation/embarkation'),
    ('USTI--', 'Missile'),
    ('USX---', 'Maintenance'),
    ('USXH--', 'Maintenance, heavy'),
    ('USXR--', 'Maintenance, recovery'),
    ('USXO--', 'Ordnance'),
    ('USXOM-', 'Ordnance, missile'),
    ('USXE--', 'Electro-optical'),
    # equipment
    ('E-----', 'Equipment'),
    ('EW----', 'Weapon'),
    ('EWM---', 'Missile launcher'),
    ('EWMA--', 'Air defense missile launcher'),
    ('EWMAS-', 'Air defense missile launcher, short range'),
    ('EWMAI-', 'Air defense missile launcher, intermediate range'),
    ('EWMAL-', 'Air defense missile launcher, long range'),
    ('EWMAT-', 'Air defense missile launcher, theater'),
    ('EWMS--', 'Surface-surface missile launcher'),
    ('EWMSS-', 'Surface-surface missile launcher, short range'),
    ('EWMSI-', 'Surface-surface missile launcher, intermediate range'),
    ('EWMSL-', 'Surface-surface missile launcher, long range'),
    ('EWMT--', 'Antitank missile launcher'),
    ('EWMTL-', 'Antitank missile launcher, light'),
    ('EWMTM-', 'Antitank missile launcher, medium'),
    ('EWMTH-', 'Antitank missile launcher, heavy'),
    ('EWS---', 'Single rocket launcher'),
    ('EWSL--', 'Single rocket launcher, light'),
    ('EWSM--', 'Single rocket launcher, medium'),
    ('EWSH--', 'Single rocket launcher, heavy'),
    ('EWX---', 'Multiple rocket launcher'),
    ('EWXL--', 'Multiple rocket launcher, light'),
    ('EWXM--', 'Multiple rocket launcher, medium'),
    ('EWXH--', 'Multiple rocket launcher, heavy'),
    ('EWT---', 'Antitank rocket launcher'),
    ('EWTL--', 'Antitank rocket launcher, light'),
    ('EWTM--', 'Antitank rocket launcher, medium'),
    ('EWTH--', 'Antitank rocket launcher, heavy'),
    ('EWR---', 'Rifle/automatic weapon'),
    ('EWRR--', 'Rifle'),
    ('EWRL--', 'Light machine gun'),
    ('EWRH--', 'Heavy machine gun'),
    ('EWZ---', 'Grenade launcher'),
    ('EWZL--', 'Grenade launcher, light'),
    ('EWZM--', 'Grenade launcher, medium'),
    ('EWZH--', 'Grenade launcher, heavy'),
    ('EWH---', 'Howitzer'),
    ('EWHL--', 'Howitzer, light'),
    ('EWHLS-', 'Howitzer, light, self-propelled'),
    ('EWHM--', 'Howitzer, medium'),
    ('EWHMS-', 'Howitzer, medium, self-propelled'),
    ('EWHH--', 'Howitzer, heavy'),
    ('EWHHS-', 'Howitzer, heavy, self-propelled'),
    ('EWG---', 'Antitank gun'),
    ('EWGL--', 'Antitank gun, light'),
    ('EWGM--', 'Antitank gun, medium'),
    ('EWGH--', 'Antitank gun, heavy'),
    ('EWGR--', 'Antitank gun, recoilless'),
    ('EWD---', 'Direct fire gun'),
    ('EWDL--', 'Direct fire gun, light'),
    ('EWDM--', 'Direct fire gun, medium'),
    ('EWDH--', 'Direct fire gun, heavy'),
    ('EWA---', 'Air defense gun'),
    ('EWAL--', 'Air defense gun, light'),
    ('EWAM--', 'Air defense gun, medium'),
    ('EWAH--', 'Air defense gun, heavy'),
    ('EWO---', 'Mortar'),
    ('EWOL--', 'Mortar, light'),
    ('EWOM--', 'Mortar, medium'),
    ('EWOH--', 'Mortar, heavy'),
    ('EV----', 'Ground vehicle'),
    ('EVA---', 'Armored vehicle'),
    ('EVAT--', 'Tank'),
    ('EVATL-', 'Tank, light'),
    ('EVATM-', 'Tank, medium'),
    ('EVATH-', 'Tank, heavy'),
    ('EVAA--', 'Armored personnel carrier'),
    ('EVAAR-', 'Armored personnel carrier, recovery'),
    ('EVAI--', 'Armored infantry'),
    ('EVAC--', 'Command and control'),
    ('EVAS--', 'Combat service support vehicle'),
    ('EVAL--', 'Light armored vehicle'),
    ('EVU---', 'Utility vehicle'),
    ('EVUB--', 'Bus'),
    ('EVUS--', 'Semi'),
    ('EVUSL-', 'Semi, light'),
    ('EVUSM-', 'Semi, medium'),
    ('EVUSH-', 'Semi, heavy'),
    ('EVUL--', 'Limited cross-country truck'),
    ('EVUX--', 'Cross-country truck'),
    ('EVUR--', 'Water craft'),
    ('EVUT--', 'Tow truck'),
    ('EVUTL-', 'Tow truck, light'),
    ('EVUTH-', 'Tow truck, heavy'),
    ('EVUA--', 'Ambulance'),
    ('EVE---', 'Engineer vehicle'),
    ('EVEB--', 'Bridge'),
    ('EVEE--', 'Earthmover'),
    ('EVEC--', 'Construction vehicle'),
    ('EVEM--', 'Mine laying vehicle'),
    ('EVEA--', 'Mine clearing vehicle'),
    ('EVED--', 'Dozer'),
    ('EVES--', 'Drill'),
    ('EVT---', 'Train locomotive'),
    ('EVC---', 'Civilian vehicle'),
    ('ES----', 'Sensor'),
    ('ESR---', 'Radar'),
    ('ESE---', 'Emplaced sensor'),
    ('EX----', 'Special equipment'),
    ('EXL---', 'Laser'),
    ('EXN---', 'CBRN equipment'),
    ('EXF---', 'Flame thrower'),
    ('EXM---', 'Land mines'),
    ('EXMC--', 'Claymore'),
    ('EXML--', 'Less than lethal'),
    ('EXI---', 'Improvised explosive device'),
    # installations
    ('I-----', 'Installation'),
    ('IR----', 'Raw material production/storage'),
    ('IRM---', 'Mine'),
    ('IRP---', 'Petroleum/gas/oil'),
    ('IRN---', 'CBRN energy production'),
    ('IRNB--', 'Biological'),
    ('IRNC--', 'Chemical'),
    ('IRNN--', 'Nuclear'),
    ('IP----', 'Processing facility'),
    ('IPD---', 'Decontamination'),
    ('IE----', 'Equipment manufacture'),
    ('IU----', 'Service, research, utility facility'),
    ('IUR---', 'Technological research facility'),
    ('IUT---', 'Telecommunications facility'),
    ('IUE---', 'Electric power facility'),
    ('IUEN--', 'Electric power, nuclear plant'),
    ('IUED--', 'Electric power, dam'),
    ('IUEF--', 'Electric power, fossil fuel'),
    ('IUP---', 'Public water services'),
    ('IM----', 'Military materiel facility'),
    ('IMF---', 'Nuclear energy'),
    ('IMA---', 'Aircraft production/assembly'),
    ('IME---', 'Ammunition and explosives production'),
    ('IMG---', 'Armament production'),
    ('IMV---', 'Military vehicle production'),
    ('IMN---', 'Engineering equipment production'),
    ('IMS---', 'Missile and space system production'),
    ('IMM---', 'Military ship production'),
    ('IB----', 'Military base/facility'),
    ('IBA---', 'Airport/airbase'),
    ('IBN---', 'Seaport/naval base'),
    ('IT----', 'Transport facility'),
    ('IX----', 'Medical facility'),
    ('IXH---', 'Hospital'),
)
