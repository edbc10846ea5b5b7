"""Combo generation - catalog, category sequencing and move selection."""
