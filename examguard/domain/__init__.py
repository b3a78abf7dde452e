"""Domain layer for Exam Guard.

Pure models, policies and errors. Nothing in this package performs I/O.
"""
