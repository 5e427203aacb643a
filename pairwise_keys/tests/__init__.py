"""
Tests package for pairwise key derivation

- Unit tests: byte stream, prime search, RSA and EC builders, models,
  configuration and logging in isolation
- Integration tests: the PairwiseKey facade end to end
"""
