import suite
from enumixin import create, Step, MissingTraversalError, NotYetImplementedError, DERIVED_OPERATIONS

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

WORDS = ['zero', 'one', 'two', 'three', 'four', 'five']


def _words_for_each(self, callback, context=None):
    for index, word in enumerate(WORDS):
        if callback(word, index, self) is Step.STOP:
            break


MissingClass = create("MissingClass")
ConstructedClass = create("ConstructedClass", {'for_each': _words_for_each})

bad = MissingClass()
words = ConstructedClass()


# --- missing traversal primitive ---

@test("for_each itself is absent on a class that never defined it")
def test_missing_for_each():
    assert_raises(AttributeError, lambda: bad.for_each(lambda v: None))


@test("every derived operation fails when for_each is missing")
def test_missing_for_each_everywhere():
    calls = {
        'contains': lambda: bad.contains('zero'),
        'every': lambda: bad.every(lambda v: True),
        'filter': lambda: bad.filter(lambda v: True),
        'find': lambda: bad.find(lambda v: True),
        'find_last': lambda: bad.find_last(lambda v: True),
        'first': lambda: bad.first(),
        'group_by': lambda: bad.group_by(lambda v: v),
        'index_of': lambda: bad.index_of('zero'),
        'last': lambda: bad.last(),
        'last_index_of': lambda: bad.last_index_of('zero'),
        'map': lambda: bad.map(lambda v: v),
        'max': lambda: bad.max(),
        'min': lambda: bad.min(),
        'range': lambda: bad.range(),
        'reduce': lambda: bad.reduce(lambda a, b: a, ''),
        'reject': lambda: bad.reject(lambda v: True),
        'size': lambda: bad.size(),
        'some': lambda: bad.some(lambda v: True),
        'tail': lambda: bad.tail(),
        'to_array': lambda: bad.to_array(),
        'to': lambda: bad.to.list(),
    }
    for name, call in calls.items():
        error = assert_raises(MissingTraversalError, call)
        assert_that(isinstance(error, TypeError), f"{name} should fail with a TypeError")
    covered = set(calls) | {'reduce_right'}
    assert_that(covered == set(DERIVED_OPERATIONS), f"uncovered operations: {set(DERIVED_OPERATIONS) - covered}")


# --- the six-word scenario ---

@test("every is true when the callback always holds")
def test_every_true():
    assert_that(words.every(lambda v: True) is True, "every should be true")


@test("every is false when the callback fails for some element")
def test_every_false():
    assert_that(words.every(lambda v, k: k > 0) is False, "key 0 fails the test")


@test("some finds a matching element")
def test_some_true():
    assert_that(words.some(lambda v, k: k == 0) is True, "key 0 matches")


@test("some is false when nothing matches")
def test_some_false():
    assert_that(words.some(lambda v: False) is False, "nothing matches")


@test("filter keeps even keys")
def test_filter_even_keys():
    result = words.filter(lambda v, k: k % 2 == 0)
    assert_that(result == ['zero', 'two', 'four'], f"unexpected filter result: {result}")


@test("map upper-cases every word")
def test_map_upper():
    result = words.map(lambda v: v.upper())
    assert_that(result == ['ZERO', 'ONE', 'TWO', 'THREE', 'FOUR', 'FIVE'], f"unexpected map result: {result}")


@test("reduce concatenates from an initial value")
def test_reduce_concat():
    result = words.reduce(lambda a, b: a + b, '')
    assert_that(result == 'zeroonetwothreefourfive', f"unexpected reduce result: {result}")


@test("to_array and size reflect the traversal")
def test_to_array_and_size():
    assert_that(words.to_array() == WORDS, "to_array should list every word in order")
    assert_that(words.size() == 6, "there are six words")


@test("first, last and tail")
def test_first_last_tail():
    assert_that(words.first() == 'zero', "first word is zero")
    assert_that(words.last() == 'five', "last word is five")
    assert_that(words.tail() == WORDS[1:], "tail drops the first word")


@test("reduce_right is a stub")
def test_reduce_right_stub():
    error = assert_raises(NotYetImplementedError, words.reduce_right, lambda a, b: a + b, '')
    assert_that(isinstance(error, NotImplementedError), "should be a NotImplementedError")
    assert_that("not yet implemented" in str(error), f"unexpected message: {error}")


if __name__ == "__main__":
    suite.run(title="enumixin core scenario test suite")
