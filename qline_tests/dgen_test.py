import suite
from dgen import Generator, from_schema
from qline import Q, Query

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

order_schema = {
    'customer': 'first_name',
    'quantity': ('pyint', {'min_value': 1, 'max_value': 9}),
    'channel': {'_qen_provider': 'choice', 'from': ['web', 'store']},
    'label': {'_qen_provider': 'ref', 'key': 'channel'},
    'currency': {'_qen_provider': 'literal', 'value': 'EUR'},
}


@test("take returns a query of generated records")
def test_take_records():
    orders = from_schema(order_schema, seed=3).take(5)
    assert_that(isinstance(orders, Query), "take builds a query")
    records = orders.to_array()
    assert_that(len(records) == 5, "five records")
    for record in records:
        assert_that(1 <= record['quantity'] <= 9, "quantity within bounds")
        assert_that(record['channel'] in ('web', 'store'), "channel from the choices")
        assert_that(record['label'] == record['channel'], "ref copies an earlier field")
        assert_that(record['currency'] == 'EUR', "literal is passed through")


@test("the same seed gives the same records")
def test_seeded():
    first = from_schema(order_schema, seed=11).take(4).to_array()
    second = from_schema(order_schema, seed=11).take(4).to_array()
    assert_that(first == second, "generation is reproducible")


@test("a schema provider is an endless source")
def test_endless_source():
    web_orders = (Q(from_schema(order_schema, seed=5))
                  .where(lambda order: order['channel'] == 'web')
                  .take(3)
                  .to_array())
    assert_that(len(web_orders) == 3, "take ends the endless stream")
    assert_that(all(order['channel'] == 'web' for order in web_orders), "only web orders")


@test("unknown providers are reported")
def test_unknown_provider():
    generator = Generator(seed=1)
    assert_raises(ValueError, lambda: generator.create({'_qen_provider': 'nope'}))
    assert_raises(ValueError, lambda: generator.create({'x': {'_qen_provider': 'ref', 'key': 'missing'}}))


@test("a schema provider only yields single values")
def test_provider_arity():
    provider = from_schema(order_schema, seed=2)
    assert_raises(ValueError, lambda: Q(provider, arity=2))
    assert_that(Q(provider, arity=1).take(2).count() == 2, "arity one is accepted")


if __name__ == "__main__":
    suite.main(title="dgen test suite")
