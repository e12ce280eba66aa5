"""
Pure algorithms with no domain-specific dependencies.

Modules:
    selectors   - Choosing one candidate out of many (random, min, max)
"""
