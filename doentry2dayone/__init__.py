"""
Convert Day One Classic (.doentry) bundles into Day One JSON imports.
"""
__version__ = "0.3.0"
