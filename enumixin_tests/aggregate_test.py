import suite
from dgen import from_schema
from enumixin import E, empty, from_range, from_mapping, EmptyEnumerableError, NotCallableError, MISSING

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

order_schema = {
    'region': {'_gen': 'choice', 'from': ['na', 'eu', 'apac']},
    'units': ('pyint', {'min_value': 1, 'max_value': 20}),
}


# --- reduce ---

@test("reduce folds left to right from an initial value")
def test_reduce_initial():
    steps = []
    result = E(['a', 'b', 'c']).reduce(lambda acc, v: steps.append((acc, v)) or acc + v, '>')
    assert_that(result == '>abc', f"unexpected reduce result: {result}")
    assert_that(steps == [('>', 'a'), ('>a', 'b'), ('>ab', 'c')], f"unexpected fold order: {steps}")


@test("reduce without an initial value seeds from the first element")
def test_reduce_seed():
    calls = []
    result = E([1, 2, 3]).reduce(lambda acc, v: calls.append(v) or acc * 10 + v)
    assert_that(result == 123, f"unexpected reduce result: {result}")
    assert_that(calls == [2, 3], "the seed element is not passed to the callback")


@test("reduce of a single element without initial value returns it untouched")
def test_reduce_single():
    assert_that(E(['only']).reduce(lambda acc, v: 1 / 0) == 'only', "callback must not run")


@test("reduce accepts None as a real initial value")
def test_reduce_none_initial():
    assert_that(empty().reduce(lambda acc, v: acc, None) is None, "None is a valid initial value")
    assert_that(E([1]).reduce(lambda acc, v: (acc, v), None) == (None, 1), "None seeds the fold")


@test("reduce accepts builtins without signatures")
def test_reduce_builtin():
    assert_that(E([3, 1, 2]).reduce(max) == 3, "max folds pairwise")
    assert_that(E([3, 1, 2]).reduce(min, 0) == 0, "min folds from the initial value")


@test("reduce passes key and container")
def test_reduce_keys():
    letters = from_mapping({'x': 1, 'y': 2})
    result = letters.reduce(lambda acc, v, k, c: acc + [(k, v, c is letters)], [])
    assert_that(result == [('x', 1, True), ('y', 2, True)], f"unexpected reduce result: {result}")


@test("reduce of an empty target without initial value fails")
def test_reduce_empty():
    error = assert_raises(EmptyEnumerableError, empty().reduce, lambda acc, v: acc)
    assert_that(isinstance(error, TypeError), "should be a TypeError")
    assert_that("no initial value" in str(error), f"unexpected message: {error}")


@test("reduce validates its callback")
def test_reduce_not_callable():
    assert_raises(NotCallableError, from_range(0, 3).reduce, None)


@test("the missing marker is falsy and distinct from None")
def test_missing_marker():
    assert_that(not MISSING and MISSING is not None, "MISSING should be a falsy sentinel")


# --- size ---

@test("size counts by enumerating")
def test_size():
    assert_that(from_range(5, 7).size() == 7, "seven elements")
    assert_that(empty().size() == 0, "empty has size zero")


# --- group_by ---

@test("group_by partitions in traversal order")
def test_group_by_basic():
    groups = from_range(0, 10).group_by(lambda x: x % 3)
    assert_that(list(groups.keys()) == [0, 1, 2], "groups appear in order of first occurrence")
    assert_that(groups[0] == [0, 3, 6, 9], f"unexpected group 0: {groups[0]}")
    assert_that(groups[1] == [1, 4, 7], f"unexpected group 1: {groups[1]}")
    assert_that(groups[2] == [2, 5, 8], f"unexpected group 2: {groups[2]}")


@test("group_by keeps every element exactly once")
def test_group_by_partition():
    orders = from_schema(order_schema, seed=7).take(40)
    groups = orders.group_by(lambda o: o['region'])
    assert_that(sum(len(g) for g in groups.values()) == 40, "every order lands in one group")
    for region, members in groups.items():
        assert_that(all(o['region'] == region for o in members), f"group '{region}' has strangers")
        expected = [o for o in orders if o['region'] == region]
        assert_that(all(a is b for a, b in zip(members, expected)), "group members keep their relative order")


@test("group_by can use keys and context")
def test_group_by_key_context():
    groups = E(['a', 'b', 'c', 'd']).group_by(lambda size, v, k: k // size, 2)
    assert_that(groups == {0: ['a', 'b'], 1: ['c', 'd']}, f"unexpected groups: {groups}")


@test("group_by of empty is an empty dict")
def test_group_by_empty():
    assert_that(empty().group_by(lambda x: x) == {}, "no groups")


if __name__ == "__main__":
    suite.run(title="enumixin aggregate operations test suite")
