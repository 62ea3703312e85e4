import re
import unicodedata
from typing import Callable, Dict, Iterable, List, Set

Normalizer = Callable[[str], str]

# \w keeps letters, digits and underscore
_non_word_re = re.compile(r"\W")


def passthrough(text: str) -> str:
    return text


def lowercase(text: str) -> str:
    return text.lower()


def strip(text: str) -> str:
    return text.strip()


def ascii_only(text: str) -> str:
    """Drop every non-ASCII code point (no transliteration)."""
    return text.encode("ascii", "ignore").decode("ascii")


def fold_to_ascii(text: str) -> str:
    """Decompose accented characters, then drop what is left outside ASCII."""
    return ascii_only(unicodedata.normalize("NFD", text))


def nfc(text: str) -> str:
    return unicodedata.normalize("NFC", text)


def nfkc(text: str) -> str:
    return unicodedata.normalize("NFKC", text)


def nfd(text: str) -> str:
    return unicodedata.normalize("NFD", text)


def nfkd(text: str) -> str:
    return unicodedata.normalize("NFKD", text)


def split_non_alphanumeric(text: str) -> str:
    """Replace each character that is not a letter, digit or underscore with a space.

    Each character is replaced one for one, so "a!!b" becomes "a  b".
    Combining marks count as non-alphanumeric: "a\\u0308bc" becomes "a bc".
    """
    return _non_word_re.sub(" ", text)


def sorted_tokens(text: str) -> str:
    return " ".join(sorted(text.split()))


def compose(*normalizers: Normalizer) -> Normalizer:
    """Chain normalizers; they run left to right."""

    def _composed(text: str) -> str:
        for normalizer in normalizers:
            text = normalizer(text)
        return text

    return _composed


def full_process(text: str, force_ascii: bool = False) -> str:
    """Default pipeline: optional ASCII filter, non-alphanumerics to spaces, lowercase, trim.

    The ASCII filter runs first, so it can change where spaces end up:
    full_process("a\u00ac4\u12342", True) == "a42" but full_process("a\u00ac4\u12342") == "a 4\u12342".
    """
    if text is None:
        return ""
    t = str(text)
    if force_ascii:
        t = ascii_only(t)
    t = split_non_alphanumeric(t)
    t = t.lower()
    return t.strip()


def tokens(text: str) -> List[str]:
    return text.split() if text else []


def token_set(text: str) -> Set[str]:
    return set(tokens(text))


NORMALIZERS: Dict[str, Normalizer] = {
    "passthrough": passthrough,
    "lowercase": lowercase,
    "strip": strip,
    "ascii_only": ascii_only,
    "fold_to_ascii": fold_to_ascii,
    "nfc": nfc,
    "nfkc": nfkc,
    "nfd": nfd,
    "nfkd": nfkd,
    "split_non_alphanumeric": split_non_alphanumeric,
    "sorted_tokens": sorted_tokens,
    "full_process": full_process,
}


def get_normalizer(name: str) -> Normalizer:
    try:
        return NORMALIZERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown normalizer {name!r}; expected one of {sorted(NORMALIZERS)}"
        ) from None


def build_normalizer(names: Iterable[str]) -> Normalizer:
    """Compose normalizers by name, e.g. ["nfkc", "lowercase"]."""
    return compose(*(get_normalizer(n) for n in names))
