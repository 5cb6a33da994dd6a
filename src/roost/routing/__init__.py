"""Positional routing — path parsing and controller dispatch."""
