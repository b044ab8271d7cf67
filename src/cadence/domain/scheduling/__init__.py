"""Scheduling domain: recurring templates, their instances and one-off rows."""
