"""
bravesearch - query the Brave Search API from the command line
"""

__version__ = "0.1.0"
