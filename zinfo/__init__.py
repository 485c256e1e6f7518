"""
zinfo: quickly get information about the current directory, git
repository, system and Python as a short colorized status report.
"""

__version__ = "1.2.1"
