"""
Support packages for envcast: typed conversion, error handling and
logging configuration.
"""
