"""
Thin pygame / pyunicodegame adapter for the badge editor.
"""
