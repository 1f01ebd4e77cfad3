import pytest
from core.narcissism import digit_count, is_narcissistic
from core.primality import DETERMINISTIC_LIMIT, is_probable_prime

@pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 153, 370, 371, 407, 8208, 9474])
def test_narcissistic_numbers(n):
    assert is_narcissistic(n)

@pytest.mark.parametrize("n", [10, 100, 152, 154, 9475])
def test_non_narcissistic_numbers(n):
    assert not is_narcissistic(n)

def test_large_narcissistic_numbers():
    # 39-digit narcissistic number, beyond 64-bit range.
    assert is_narcissistic(115132219018763992565095597973971522401)
    assert is_narcissistic(4679307774)
    assert not is_narcissistic(115132219018763992565095597973971522400)

def test_negative_is_not_narcissistic():
    assert not is_narcissistic(-153)

def test_digit_count():
    assert digit_count(0) == 1
    assert digit_count(9) == 1
    assert digit_count(10) == 2
    assert digit_count(2**64 - 1) == 20

@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 97, 7919, 2**61 - 1, 18446744073709551557])
def test_known_primes(n):
    assert is_probable_prime(n)

@pytest.mark.parametrize("n", [0, 1, 4, 6, 9, 100, 561, 2**64 - 1, 3215031751])
def test_known_composites(n):
    # 561 is a Carmichael number, 3215031751 a strong pseudoprime to bases 2, 3, 5, 7.
    assert not is_probable_prime(n)

def test_large_values_use_random_rounds():
    mersenne = 2**127 - 1
    assert mersenne > DETERMINISTIC_LIMIT
    assert is_probable_prime(mersenne)
    assert not is_probable_prime(mersenne * (2**61 - 1))
    # Same answer on every call.
    assert is_probable_prime(mersenne, rounds=5) == is_probable_prime(mersenne, rounds=5)

def test_invalid_rounds():
    with pytest.raises(ValueError):
        is_probable_prime(97, rounds=0)

def test_agrees_with_sympy_on_generated_values():
    from sympy import isprime
    from core.generator import generate_values
    values = generate_values(3000, seed=21) + list(range(0, 2000))
    mismatches = [v for v in values if is_probable_prime(v) != isprime(v)]
    assert not mismatches, f"Classification differs for {mismatches[:5]}"
