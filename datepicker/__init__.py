"""
datepicker - Date/time selection engine with calendar grid and clock dial.
"""

__version__ = "0.1.0"
