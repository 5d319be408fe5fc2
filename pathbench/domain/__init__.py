"""Graph domains the benchmark can load."""
