"""Domain models and errors.

Pure data structures: the domain does not know about subprocesses or the CLI,
only about the problem concepts (commands, platform targets, failures).
"""
