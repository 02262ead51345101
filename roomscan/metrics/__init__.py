"""Batch-level tallies of rule outcomes."""
