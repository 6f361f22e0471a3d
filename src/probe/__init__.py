"""Remote query validation for published snapshots."""
