"""Hilfsskripte fuer manuelle Proben."""
