"""HTTP surface for the landbattle engine."""
