"""Number theory: gcd, binomials, modular powers, sieves and digit arithmetic."""

from functools import lru_cache

MOD = 1_000_000_007
_PRIME_LIMIT = 10**6 + 7
_VOWELS = "aeiouAEIOU"


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers."""
    if a < 0 or b < 0:
        raise ValueError("gcd requires non-negative integers")
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of two non-negative integers."""
    divisor = gcd(a, b)
    if divisor == 0:
        return 0
    return a // divisor * b


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def extended_gcd(a: int, b: int) -> tuple[int, int]:
    """Return ``(x, y)`` with ``a*x + b*y == gcd(a, b)``.

    The base case ``b == 0`` yields ``(1, 1)``; division truncates toward zero.
    """
    if b == 0:
        return 1, 1
    quotient = _trunc_div(a, b)
    x2, y2 = extended_gcd(b, a - quotient * b)
    return y2, x2 - quotient * y2


def ncr(n: int, r: int) -> int:
    """Binomial coefficient ``C(n, r)`` reduced modulo 1_000_000_007."""
    r = min(r, n - r)
    ans = 1
    for i in range(r):
        ans = ans * (n - i) // (i + 1) % MOD
    return ans


def power_mod(a: int, n: int, mod: int) -> int:
    """Compute ``a**n % mod`` by repeated squaring."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    if mod == 0:
        raise ZeroDivisionError("modulus must be non-zero")
    return pow(a, n, mod)


class Sieve:
    """Sieve of Eratosthenes covering ``0..upper_bound + 1``."""

    def __init__(self, upper_bound: int) -> None:
        if upper_bound < 1:
            raise ValueError("upper bound must be at least 1")
        self._size = upper_bound + 1
        flags = bytearray([1]) * (self._size + 1)
        flags[0] = flags[1] = 0
        found = []
        for i in range(2, self._size + 1):
            if flags[i]:
                flags[i * i::i] = bytes(len(range(i * i, self._size + 1, i)))
                found.append(i)
        self._flags = flags
        self._primes = found

    def is_prime(self, n: int) -> bool:
        """Look ``n`` up in the table, or trial-divide by the sieved primes."""
        if n <= self._size:
            return n >= 0 and bool(self._flags[n])
        return all(n % p for p in self._primes)

    def primes(self) -> list[int]:
        """Primes found by the sieve, in ascending order."""
        return list(self._primes)


def _odd_composite_flags(n: int) -> bytearray:
    """Flags indexed by ``k`` for the odd number ``2k + 1``; 1 marks composite."""
    flags = bytearray((n >> 1) + 1)
    i = 3
    while i * i <= n:
        if not flags[i >> 1]:
            for j in range(i * i, n + 1, 2 * i):
                flags[j >> 1] = 1
        i += 2
    return flags


def odd_sieve_primes(n: int) -> list[int]:
    """Return 2 followed by the odd primes up to ``n`` (2 is always listed)."""
    flags = _odd_composite_flags(max(n, 0))
    return [2] + [i for i in range(3, n + 1, 2) if not flags[i >> 1]]


def odd_primes_up_to(limit: int) -> list[int]:
    """Return the odd primes from 3 up to ``limit`` inclusive."""
    flags = _odd_composite_flags(max(limit, 0))
    return [i for i in range(3, limit + 1, 2) if not flags[i >> 1]]


def primes_below(limit: int) -> list[int]:
    """Return all primes strictly less than ``limit``."""
    if limit <= 2:
        return []
    marks = bytearray([1]) * (limit + 1)
    marks[0] = marks[1] = 0
    i = 2
    while i * i <= limit:
        if marks[i]:
            marks[i * i::i] = bytes(len(range(i * i, limit + 1, i)))
        i += 1
    return [i for i in range(2, limit) if marks[i]]


@lru_cache(maxsize=1)
def _default_primes() -> tuple[int, ...]:
    return tuple(primes_below(_PRIME_LIMIT))


def nth_primes(count: int) -> list[int]:
    """Return the ``count`` primes that follow 2 (the 2nd through ``count+1``-th)."""
    if count < 0:
        raise ValueError("count must be non-negative")
    table = _default_primes()
    if count >= len(table):
        raise IndexError(f"only {len(table) - 1} primes are available")
    return list(table[1:count + 1])


def _digit_values(digits: str) -> list[int]:
    if not digits or not digits.isdigit():
        raise ValueError(f"not a decimal number: {digits!r}")
    return [ord(ch) - ord("0") for ch in digits]


def string_mod(digits: str, mod: int) -> int:
    """Remainder of a decimal number given as text, digit by digit."""
    if mod <= 0:
        raise ValueError("modulus must be positive")
    current = 0
    for digit in _digit_values(digits):
        current = ((current * 10) % mod + digit % mod) % mod
    return current


def long_division(number: str, divisor: int) -> tuple[str, int]:
    """Divide a decimal number given as text by ``divisor`` using long division.

    Returns the quotient digits (empty when the quotient is zero) and the
    remainder.
    """
    if divisor <= 0:
        raise ValueError("divisor must be positive")
    quotient = []
    remainder = 0
    for digit in _digit_values(number):
        remainder = remainder * 10 + digit
        if remainder < divisor and not quotient:
            continue
        quotient.append(str(remainder // divisor))
        remainder %= divisor
    return "".join(quotient), remainder


def split_words(text: str) -> list[str]:
    """Split ``text`` on whitespace."""
    return text.split()


def is_vowel(ch: str) -> bool:
    """True for an English vowel in either case."""
    return len(ch) == 1 and ch in _VOWELS