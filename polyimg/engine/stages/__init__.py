"""Conversion stages. Each module registers one stage on import."""
