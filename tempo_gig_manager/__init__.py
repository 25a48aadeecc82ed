"""Tempo Gig Manager backend: a marketplace connecting music venues with artists and bands."""
