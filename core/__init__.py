"""
Core module — identity key, value types, time, configuration and errors
shared by every other package.
"""
