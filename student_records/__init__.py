"""
Student Records - a command-line record manager for student records.

Records live in a flat comma-delimited text file (one student per line)
behind a small repository abstraction, so the menu shell never touches
the storage format directly.
"""

__version__ = "0.1.0"
