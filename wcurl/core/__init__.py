"""
Core engine: detects what the installed curl supports, assembles the curl
command line for a run and executes it.
"""
