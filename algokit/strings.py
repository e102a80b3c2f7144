"""String algorithms: KMP matching and a few text puzzles."""

from collections import Counter
from string import ascii_lowercase

_DUB = "WUB"


def lps_table(pattern: str) -> list[int]:
    """Longest proper prefix that is also a suffix, for every prefix of ``pattern``."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length == 0:
            lps[i] = 0
            i += 1
        else:
            length = lps[length - 1]
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return the start index of every (possibly overlapping) match."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = lps_table(pattern)
    matches = []
    k = 0
    for i, ch in enumerate(text):
        while k and ch != pattern[k]:
            k = lps[k - 1]
        if ch == pattern[k]:
            k += 1
        if k == len(pattern):
            matches.append(i - len(pattern) + 1)
            k = lps[k - 1]
    return matches


def undubstep(remix: str) -> str:
    """Turn each ``WUB`` after the first word into a space and drop the leading ones."""
    out = []
    started = False
    i = 0
    while i < len(remix):
        if remix.startswith(_DUB, i):
            if started:
                out.append(" ")
            i += len(_DUB)
        else:
            out.append(remix[i])
            started = True
            i += 1
    return "".join(out)


def is_translation(word: str, candidate: str) -> bool:
    """True when ``candidate`` is ``word`` spelled backwards."""
    return word == candidate[::-1]


def k_string(k: int, text: str) -> str | None:
    """Rearrange ``text`` into ``k`` copies of one string, or return None."""
    if k <= 0:
        raise ValueError("k must be positive")
    if any(ch not in ascii_lowercase for ch in text):
        raise ValueError("text must hold lowercase letters only")
    counts = Counter(text)
    if any(count % k for count in counts.values()):
        return None
    base = "".join(ch * (counts[ch] // k) for ch in ascii_lowercase)
    return base * k