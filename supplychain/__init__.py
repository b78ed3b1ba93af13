"""Turn-based simulation of suppliers feeding parts to a factory."""

__version__ = "1.0.0"
__all__ = ["part", "warehouse", "supplier", "factory", "cli"]