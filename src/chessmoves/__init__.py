"""chessmoves - legal destination squares for pieces on a grid board."""

__version__ = "0.1.0"
