"""Example scripts for hostkit.

These demonstrate library usage but are not part of the core API.
"""
