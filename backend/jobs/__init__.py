"""
Maintenance jobs run against the shard directory.
"""
