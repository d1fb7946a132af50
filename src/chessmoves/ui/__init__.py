"""PyQt6 board viewer."""
