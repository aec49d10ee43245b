HT_PRIME_1 = 151
HT_PRIME_2 = 163


def hash_string(s: str, a: int, m: int) -> int:
    """Read s as a base-a number over its character codes, modulo m.

    Reducing at every step keeps intermediate values below a * m.
    """
    hash = 0
    for c in s:
        hash = (hash * a + ord(c)) % m
    return hash


def get_hash(s: str, num_buckets: int, attempt: int) -> int:
    """Slot index for the given probe attempt of s.

    hash_b is taken modulo num_buckets - 1, so the step hash_b + 1 is never
    a multiple of num_buckets. With a prime num_buckets the first
    num_buckets attempts visit every slot once.
    """
    hash_a = hash_string(s, HT_PRIME_1, num_buckets)
    if num_buckets < 2:
        return hash_a

    hash_b = hash_string(s, HT_PRIME_2, num_buckets - 1)
    return (hash_a + attempt * (hash_b + 1)) % num_buckets
