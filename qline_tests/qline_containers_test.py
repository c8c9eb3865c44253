import suite
from qline import Q, Trie, TypedList, TypedDict, ReadOnlyList, ReadOnlyDict, ReadOnlyError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


# --- typed collections ---

@test("typed list accepts declared types only")
def test_typed_list():
    numbers = TypedList(int, [1, 2])
    numbers.append(3)
    numbers.insert(0, 0)
    numbers.extend([4, 5])
    assert_that(numbers == [0, 1, 2, 3, 4, 5], "ints are accepted")

    error = assert_raises(TypeError, lambda: numbers.append('six'))
    assert_that('int' in str(error) and 'str' in str(error), "message names accepted and offending types")
    assert_that(numbers == [0, 1, 2, 3, 4, 5], "a rejected value is not stored")


@test("typed list checks construction and item assignment")
def test_typed_list_assignment():
    assert_raises(TypeError, lambda: TypedList(str, ['a', 1]))
    values = TypedList((int, float), [1, 2.5])

    def assign():
        values[0] = 'x'

    def assign_slice():
        values[0:1] = [None]

    assert_raises(TypeError, assign)
    assert_raises(TypeError, assign_slice)
    values[1] = 3
    assert_that(values == [1, 3], "valid assignment goes through")


@test("typed list rejects a non-type declaration")
def test_typed_list_bad_declaration():
    assert_raises(TypeError, lambda: TypedList('int'))


@test("typed dict validates keys and values")
def test_typed_dict():
    ages = TypedDict(str, int, {'amy': 30})
    ages['bob'] = 41
    ages.update({'cat': 25})
    assert_that(ages == {'amy': 30, 'bob': 41, 'cat': 25}, "valid entries are stored")

    def bad_key():
        ages[1] = 2

    def bad_value():
        ages['dan'] = 'old'

    key_error = assert_raises(TypeError, bad_key)
    assert_that(str(key_error).startswith('key'), "the key is blamed")
    value_error = assert_raises(TypeError, bad_value)
    assert_that(str(value_error).startswith('value'), "the value is blamed")
    assert_raises(TypeError, lambda: ages.setdefault('eve', 'x'))


@test("typed dict checks in-place union")
def test_typed_dict_ior():
    ages = TypedDict(str, int, {'amy': 30})
    ages |= {'bob': 41}
    assert_that(ages == {'amy': 30, 'bob': 41}, "valid pairs are merged")
    assert_that(isinstance(ages, TypedDict), "still a typed dict")

    def bad_merge():
        target = TypedDict(str, int)
        target |= {1: 'x'}

    assert_raises(TypeError, bad_merge)


@test("typed collections are query sources")
def test_typed_as_source():
    result = Q(TypedList(int, [3, 1, 2])).order_by(lambda l, r: l - r).to_array()
    assert_that(result == [1, 2, 3], "a typed list sorts like a list")
    assert_that(Q(TypedDict(str, int, {'a': 1})).to_array() == [('a', 1)], "a typed dict yields pairs")


# --- read-only collections ---

@test("read-only list refuses every mutation")
def test_read_only_list():
    frozen = ReadOnlyList([1, 2, 3])
    assert_that(frozen[0] == 1 and len(frozen) == 3, "reads still work")

    def assign():
        frozen[0] = 9

    for mutate in (lambda: frozen.append(4), lambda: frozen.pop(), lambda: frozen.sort(),
                   lambda: frozen.clear(), assign):
        error = assert_raises(ReadOnlyError, mutate)
        assert_that(str(error) == 'collection is read-only', "dedicated message")
    assert_that(frozen == [1, 2, 3], "contents unchanged")


@test("read-only dict refuses every mutation")
def test_read_only_dict():
    frozen = ReadOnlyDict({'a': 1})

    def assign():
        frozen['b'] = 2

    def delete():
        del frozen['a']

    for mutate in (assign, delete, lambda: frozen.update(b=2), lambda: frozen.pop('a')):
        assert_raises(ReadOnlyError, mutate)
    assert_that(Q(frozen).to_map() == {'a': 1}, "still readable as a source")


@test("read-only error is a type error")
def test_read_only_error_type():
    assert_that(issubclass(ReadOnlyError, TypeError), "callers can catch TypeError")


# --- trie ---

@test("trie stores and finds keys")
def test_trie_basic():
    trie = Trie(['car', 'cart', 'cat', 'dog'])
    assert_that('cart' in trie and trie.contains('dog'), "inserted keys are found")
    assert_that('ca' not in trie, "a prefix alone is not a key")
    assert_that(len(trie) == 4 and trie.count() == 4, "four keys")
    assert_that(not trie.insert('car'), "duplicate insert reports False")
    assert_that(len(trie) == 4, "duplicates are not counted")


@test("trie answers prefix queries in lexical order")
def test_trie_prefix():
    trie = Trie(['cat', 'car', 'cart', 'dog'])
    assert_that(trie.with_prefix('ca') == ['car', 'cart', 'cat'], "all keys under 'ca'")
    assert_that(trie.with_prefix('x') == [], "unknown prefix")
    assert_that(list(trie) == ['car', 'cart', 'cat', 'dog'], "iteration is lexical")


@test("trie delete removes keys and prunes")
def test_trie_delete():
    trie = Trie(['car', 'cart'])
    trie.delete('cart')
    assert_that(list(trie) == ['car'], "cart is gone")
    assert_that(trie.with_prefix('cart') == [], "its branch is pruned")
    trie.delete('car')
    assert_that(len(trie) == 0 and list(trie) == [], "empty again")


@test("trie delete of a missing key raises KeyError")
def test_trie_delete_missing():
    trie = Trie(['car'])
    assert_raises(KeyError, lambda: trie.delete('ca'))
    assert_raises(KeyError, lambda: trie.delete('cars'))


@test("trie clear and type checks")
def test_trie_clear():
    trie = Trie(['a', 'b'])
    trie.clear()
    assert_that(len(trie) == 0 and 'a' not in trie, "clear empties the trie")
    assert_raises(TypeError, lambda: trie.insert(5))


@test("trie is a query source")
def test_trie_as_source():
    trie = Trie(['apple', 'fig', 'banana', 'kiwi'])
    result = Q(trie).where(lambda word: len(word) > 3).select(str.upper).to_array()
    assert_that(result == ['APPLE', 'BANANA', 'KIWI'], "keys flow through the pipeline")


if __name__ == "__main__":
    suite.main(title="qline collections test suite")
