"""
Badge Designer - draw LED badge animations and export badgemagic-rs configs.
"""

__version__ = "0.1.0"
