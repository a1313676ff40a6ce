"""
Command line entry point and bundled samples.
"""
