"""
Integration tests that run the domgraph CLI end to end.
"""
