"""
The MIL-STD-2525C taxonomy: the closed field enumerations, the function id
catalogue, and validation of symbol identification codes against them.
"""

__classification__ = "UNCLASSIFIED"
