"""
**milsidc** is a Python package for handling MIL-STD-2525C symbol identification
codes (SIDC). The 15 character codes are parsed into their six fields, serialized
back to text, and validated against the standard's enumerations and function id
catalogue.
"""

from .__about__ import *
import logging


__all__ = ['__version__',
           '__classification__', '__author__', '__url__', '__email__',
           '__title__', '__summary__',
           '__license__', '__copyright__']


logger = logging.getLogger(__name__)
logger.setLevel(logging.WARNING)
