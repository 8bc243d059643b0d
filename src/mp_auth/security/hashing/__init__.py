"""Security – credential hashing."""
from mp_auth.security.hashing.algorithm import HashingAlgorithm
from mp_auth.security.hashing.hash_string import HashString
from mp_auth.security.hashing.pbkdf2 import DEFAULT_ITERATIONS, PBKDF2
from mp_auth.security.hashing.strategy import HashingStrategy

__all__ = ["DEFAULT_ITERATIONS", "HashString", "HashingAlgorithm", "HashingStrategy", "PBKDF2"]
