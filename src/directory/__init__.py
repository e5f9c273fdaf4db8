"""
Package marker for source code under `src.directory`.
It holds the fixed agent table and the region lookups computed over it.
"""
