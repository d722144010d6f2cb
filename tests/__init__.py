"""
bsvwrap Test Suite
"""
