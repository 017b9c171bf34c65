"""
TargetApp: a small integer calculator with a command-line front end.
"""

__version__ = "0.1.0"
