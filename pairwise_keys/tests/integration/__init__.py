"""
Integration tests for the PairwiseKey facade
"""
