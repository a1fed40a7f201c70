"""HTTP surface for the name clustering engines."""
