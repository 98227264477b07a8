import suite
from dgen import from_schema
from seqy import of, where, where_equals, SequenceAdapter, InvalidArgumentError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

person_schema = {
    'name': 'first_name',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'department': {'_dgen': 'choice', 'from': ['eng', 'sales', 'hr']},
}

numbers = of(range(1, 11))
is_even = lambda x: x % 2 == 0


# only() / filter() tests

@test("only keeps matching elements in order")
def test_only_basic():
    assert_that(numbers.only(is_even).to_list() == [2, 4, 6, 8, 10], "should keep even numbers")


@test("only on strings by length")
def test_only_strings():
    result = of("a", "bb", "ccc").only(lambda s: len(s) > 1).to_list()
    assert_that(result == ["bb", "ccc"], f"should keep longer strings: {result}")


@test("filter is an alias of only")
def test_filter_alias():
    assert_that(numbers.filter(is_even) == numbers.only(is_even), "filter and only should agree")


@test("only with no match is empty")
def test_only_empty():
    assert_that(numbers.only(lambda x: x > 100).is_empty(), "nothing should survive")


@test("only(None) raises before traversal")
def test_only_none():
    assert_raises(InvalidArgumentError, lambda: numbers.only(None))


@test("only on fixture records")
def test_only_records():
    people = from_schema(person_schema, seed=42).take(30)
    engineers = people.only(lambda p: p['department'] == 'eng').to_list()
    assert_that(all(p['department'] == 'eng' for p in engineers), "all should be engineers")
    others = people.exclude(lambda p: p['department'] == 'eng').to_list()
    assert_that(len(engineers) + len(others) == 30, "only and exclude should partition the records")


# laziness

@test("filter views are lazy and re-evaluated per traversal")
def test_only_is_lazy():
    calls = []

    def tracking(x):
        calls.append(x)
        return x > 1

    view = of(1, 2, 3).only(tracking)
    assert_that(calls == [], "nothing should run until traversal")
    view.to_list()
    assert_that(calls == [1, 2, 3], f"predicate runs once per element: {calls}")
    view.to_list()
    assert_that(calls == [1, 2, 3, 1, 2, 3], "a second traversal runs the predicate again")


@test("views see later changes to the backing list")
def test_only_sees_source_changes():
    backing = [1, 2]
    view = of(backing).only(is_even)
    backing.append(4)
    assert_that(view.to_list() == [2, 4], "the view should reflect the appended element")


# exclude() tests

@test("exclude is the complement of only")
def test_exclude_basic():
    assert_that(numbers.exclude(is_even).to_list() == [1, 3, 5, 7, 9], "should keep odd numbers")


@test("only then exclude with the same predicate is empty")
def test_only_exclude_empty():
    assert_that(numbers.only(is_even).exclude(is_even).is_empty(), "nothing can satisfy both")


@test("only concatenated with exclude keeps every element")
def test_partition_property():
    merged = numbers.only(is_even).concat(numbers.exclude(is_even)).to_list()
    assert_that(sorted(merged) == numbers.to_list(), "the multiset should be unchanged")


@test("exclude_values drops equal elements")
def test_exclude_values():
    result = of(1, 2, 3, 2, 4).exclude_values(2, 4).to_list()
    assert_that(result == [1, 3], f"2s and 4s should be gone: {result}")


@test("exclude_all drops members of a collection")
def test_exclude_all():
    result = of('a', 'b', 'c').exclude_all(['b', 'z']).to_list()
    assert_that(result == ['a', 'c'], f"b should be gone: {result}")
    result = of('a', 'b', 'c').exclude_all({'a', 'c'}).to_list()
    assert_that(result == ['b'], f"set members should be gone: {result}")


@test("exclude_all handles unhashable elements")
def test_exclude_unhashable():
    result = of([1], [2], [3]).exclude_values([2]).to_list()
    assert_that(result == [[1], [3]], f"lists should be compared by equality: {result}")
    result = of(1, [2], 3).exclude_values(1).to_list()
    assert_that(result == [[2], 3], f"unhashable items should survive a hashed lookup: {result}")


@test("exclude_all snapshots the collection")
def test_exclude_snapshot():
    banned = [1]
    view = of(1, 2, 3).exclude_all(banned)
    banned.append(2)
    assert_that(view.to_list() == [2, 3], "later changes to the collection are not seen")


@test("exclude rejects None arguments")
def test_exclude_none():
    assert_raises(InvalidArgumentError, lambda: numbers.exclude(None))
    assert_raises(InvalidArgumentError, lambda: numbers.exclude_all(None))


# not_nulls() / of_type()

@test("not_nulls drops None but keeps falsy values")
def test_not_nulls():
    result = of(0, None, '', None, False, 1).not_nulls().to_list()
    assert_that(result == [0, '', False, 1], f"only None should be dropped: {result}")


@test("of_type keeps instances")
def test_of_type():
    result = of(1, 'a', 2.5, 'b').of_type(str).to_list()
    assert_that(result == ['a', 'b'], f"should keep strings: {result}")


# where() / where_equals()

@test("where projects through a key")
def test_where():
    long_name = where(len, lambda n: n > 3)
    result = of('ann', 'bobby', 'cy', 'daniel').only(long_name).to_list()
    assert_that(result == ['bobby', 'daniel'], f"should keep names longer than 3: {result}")


@test("where_equals compares the key to a value")
def test_where_equals():
    people = of({'n': 'a', 'd': 'eng'}, {'n': 'b', 'd': 'hr'}, {'n': 'c', 'd': 'eng'})
    result = people.only(where_equals(lambda p: p['d'], 'eng')).to(lambda p: p['n']).to_list()
    assert_that(result == ['a', 'c'], f"should keep engineers: {result}")


@test("where_equals accepts None as the value")
def test_where_equals_none():
    result = of({'x': None}, {'x': 1}).only(where_equals(lambda r: r['x'], None)).to_list()
    assert_that(result == [{'x': None}], f"should match the None key: {result}")


@test("combinators are reusable static methods too")
def test_where_static():
    predicate = SequenceAdapter.where_equals(abs, 2)
    assert_that(of(-2, 1, 2).only(predicate).to_list() == [-2, 2], "abs key should match both")
    assert_that(of(5, 6).only(predicate).is_empty(), "the same predicate works on another adapter")


@test("combinators reject None arguments")
def test_where_none():
    assert_raises(InvalidArgumentError, lambda: where(None, bool))
    assert_raises(InvalidArgumentError, lambda: where(len, None))
    assert_raises(InvalidArgumentError, lambda: where_equals(None, 1))


if __name__ == "__main__":
    suite.main(title="seqy filtering test suite")
