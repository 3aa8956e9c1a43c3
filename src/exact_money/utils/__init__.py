"""Small numeric helpers shared by the money value type."""
