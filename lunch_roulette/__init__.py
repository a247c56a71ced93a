"""Lunch Roulette API: nearby restaurant search backed by Azure Maps."""
