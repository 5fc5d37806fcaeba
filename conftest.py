"""
Root conftest - lets the test suite import the in-tree templatereview package.
"""
