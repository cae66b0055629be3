"""
The MIL-STD-2525C function id catalogue.

Each module below this package holds the function ids of exactly one coding
scheme and battle dimension pair, as plain data. The modules are discovered
and registered by :mod:`milsidc.taxonomy.registration`, so the catalogue can
be regenerated from the published standard without any change to the
validation logic.

The Operations, METOC and Emergency Management coding schemes carry no
function id catalogue here.
"""

__classification__ = "UNCLASSIFIED"
