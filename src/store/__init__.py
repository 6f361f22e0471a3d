"""Object storage and retention layer.

This module talks to the snapshot bucket and decides which dated
snapshots fall outside the retention window.
"""
