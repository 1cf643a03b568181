"""Консольная оболочка калькулятора (entry point mpcalc)."""
