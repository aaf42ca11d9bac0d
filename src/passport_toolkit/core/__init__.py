"""
Core package: host-independent models shared by the sheet pipeline.
"""
