"""vendorpatch - unified diff patches for vendor package modifications"""

__version__ = "1.0.0"
