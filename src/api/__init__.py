"""HTTP surface of the snippet store."""
