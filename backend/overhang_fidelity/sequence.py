from itertools import product

from Bio.Seq import reverse_complement as _bio_reverse_complement

DNA_BASES = "ACGT"


def canonical_overhang(overhang: str) -> str:
    return (overhang or "").strip().upper()


def reverse_complement(overhang: str) -> str:
    """Return the reverse complement of an overhang in canonical (uppercase) form."""
    return _bio_reverse_complement(canonical_overhang(overhang))


def is_self_complementary(overhang: str) -> bool:
    """Palindromic overhangs ligate to themselves and can never direct assembly order."""
    seq = canonical_overhang(overhang)
    return seq == reverse_complement(seq)


def enumerate_overhangs(length: int) -> tuple[str, ...]:
    """Every ACGT sequence of the given length, in lexicographic ACGT order."""
    if length <= 0:
        return ()
    return tuple("".join(bases) for bases in product(DNA_BASES, repeat=length))
