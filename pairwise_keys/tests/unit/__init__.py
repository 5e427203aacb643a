"""
Unit tests for pairwise key components

- test_byte_stream.py: HMAC chaining
- test_prime_search.py: Miller-Rabin and prime search
- test_rsa_builder.py: RSA component assembly
- test_ec_builder.py: secp256k1 derivation
- test_models.py: JWK encoding and derived key object
- test_config.py / test_logging_config.py: ambient configuration
"""
