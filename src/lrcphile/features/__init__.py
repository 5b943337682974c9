"""Feature packages grouped by capability."""
