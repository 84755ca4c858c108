"""molt - Selective directory pruning and compressed backups.

Clears out the contents of a directory while keeping a named set of
entries, and packs paths into tar archives compressed with pigz.
"""

__version__ = "0.1.0"
