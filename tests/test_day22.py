from advent2024.day22 import (
    NumberGenerator,
    find_best_sequence,
    find_first_occurrence,
    get_changes,
    get_most_bananas,
    get_numbers,
    mix,
    parse_input,
    price,
    prune,
)


def test_mix_and_prune():
    assert mix(42, 15) == 37
    assert prune(100000000) == 16113920


def test_generate():
    expected = [
        15887950, 16495136, 527345, 704524, 1553684,
        12683156, 11100544, 12249484, 7753432, 5908254,
    ]
    rng = NumberGenerator()
    assert list(rng.generate_n_iter(123, len(expected))) == expected
    assert rng.generate_n(123, 10) == 5908254


def test_input():
    inputs = parse_input("1\n10\n100\n2024")
    assert inputs == [1, 10, 100, 2024]

    rng = NumberGenerator()
    actual = [rng.generate_n(x, 2000) for x in inputs]
    assert actual == [8685429, 4700978, 15273692, 8667524]
    assert sum(actual) == 37327623

    numbers = [get_numbers(x, rng) for x in [1, 2, 3, 2024]]
    changes = [get_changes(n) for n in numbers]
    seq, _ = find_best_sequence(numbers, changes)
    sequence = (-2, 1, -1, 3)
    assert seq == sequence

    first = list(rng.generate_n_iter(1, 2000))
    a = find_first_occurrence(get_changes(first), sequence)
    assert price(first[a]) == 7

    second = list(rng.generate_n_iter(2, 2000))
    b = find_first_occurrence(get_changes(second), sequence)
    assert price(second[b]) == 7

    third = list(rng.generate_n_iter(3, 2000))
    assert find_first_occurrence(get_changes(third), sequence) is None

    assert get_most_bananas([1, 2, 3, 2024], rng) == 23


def test_changes():
    numbers = [
        123, 15887950, 16495136, 527345, 704524,
        1553684, 12683156, 11100544, 12249484, 7753432,
    ]
    assert get_changes(numbers) == [0, -3, 6, -1, -1, 0, 2, -2, 0, -2]