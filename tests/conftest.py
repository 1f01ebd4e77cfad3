import pytest

@pytest.fixture
def small_corpus():
    # 5 x3, 3 x2, 2 x1, 9 x1
    return [5, 5, 5, 3, 3, 2, 9]

@pytest.fixture
def mixed_corpus():
    """Primes, narcissistic numbers, composites and a few repeats."""
    return [
        2, 3, 5, 7, 11, 97,            # primes (2, 3, 5, 7 are also narcissistic)
        1, 4, 6, 8, 9, 100,            # composites / non-primes
        153, 370, 371, 407, 8208, 9474,  # narcissistic
        10, 152,
        97, 97, 153, 4, 4, 4,
        18446744073709551557,          # largest 64-bit prime
        18446744073709551615,          # 2**64 - 1, composite
    ]

@pytest.fixture
def corpus_file(tmp_path, small_corpus):
    path = tmp_path / "corpus.txt"
    path.write_text("".join(f"{v} " for v in small_corpus), encoding="utf-8")
    return path

@pytest.fixture
def dummy_logger(caplog):
    caplog.set_level("DEBUG")
    return caplog
