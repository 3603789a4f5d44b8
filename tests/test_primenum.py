import itertools

import pytest

from primebench import primenum
from primebench.primenum import BenchmarkResult, InvalidArgument, is_prime, iter_primes, run


class TestIsPrime:
    def test_matches_reference_sieve(self, reference_sieve):
        for n, expected in enumerate(reference_sieve):
            assert is_prime(n) == bool(expected), n

    @pytest.mark.parametrize("n", [0, 1, 4, 9])
    def test_not_prime(self, n):
        assert not is_prime(n)

    def test_two_is_first_prime(self):
        assert is_prime(2)

    @pytest.mark.parametrize("n", [25, 49, 121, 10201, 1000003 ** 2])
    def test_perfect_squares_of_primes(self, n):
        assert not is_prime(n)

    def test_negative(self):
        assert not is_prime(-7)


class TestIterPrimes:
    def test_first_prime_is_two(self):
        assert next(iter_primes()) == 2

    def test_first_five(self):
        assert list(itertools.islice(iter_primes(), 5)) == [2, 3, 5, 7, 11]


class TestRun:
    def test_drives_prime_sequence(self, monkeypatch):
        monkeypatch.setattr(primenum, "iter_primes", lambda: iter([2, 3, 5, 97]))
        result = run(3)
        assert result.primes_found == 3
        assert result.last_prime == 5
        assert result.candidates_scanned == 6

    def test_single_prime(self):
        result = run(1)
        assert isinstance(result, BenchmarkResult)
        assert result.elapsed_millis >= 0
        assert result.primes_found == 1
        assert result.last_prime == 2
        assert result.candidates_scanned == 3

    def test_five_primes(self):
        result = run(5)
        assert result.primes_found == 5
        assert result.last_prime == 11

    def test_agrees_with_iter_primes(self):
        expected = list(itertools.islice(iter_primes(), 1000))[-1]
        assert run(1000).last_prime == expected == 7919

    def test_repeated_runs_find_target(self):
        for _ in range(3):
            assert run(200).primes_found == 200

    def test_scan_grows_with_target(self):
        scanned = [run(n).candidates_scanned for n in (1, 2, 10, 50, 51, 300)]
        assert scanned == sorted(scanned)

    def test_body(self):
        result = BenchmarkResult(elapsed_millis=42, primes_found=5, last_prime=11, candidates_scanned=12)
        assert result.to_body() == {"time": 42}

    @pytest.mark.parametrize("target", [0, -1, -500000])
    def test_rejects_non_positive(self, target):
        with pytest.raises(InvalidArgument):
            run(target)

    @pytest.mark.parametrize("target", [1.0, "5", None, True])
    def test_rejects_non_integer(self, target):
        with pytest.raises(InvalidArgument):
            run(target)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            run(0)
