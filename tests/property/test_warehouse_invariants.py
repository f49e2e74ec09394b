"""Property test: Warehouse invariants under random operation sequences.

Uses hypothesis to drive add/update/remove/clear/drain sequences against a
plain-Python model and checks that the registry agrees with it after every
step:

- products are listed in insertion order of the survivors
- the changed-set only references registered products, in first-change order
"""

from decimal import Decimal
from uuid import uuid4

from hypothesis import HealthCheck, given, settings, strategies as st

from warehouse.catalog.warehouse import Warehouse
from warehouse.core.category import Category
from warehouse.core.models import ElectronicsProduct

POOL_SIZE = 8

_ops = st.lists(
    st.one_of(
        st.tuples(st.just("add"), st.integers(0, POOL_SIZE - 1)),
        st.tuples(st.just("update"), st.integers(0, POOL_SIZE - 1)),
        st.tuples(st.just("remove"), st.integers(0, POOL_SIZE - 1)),
        st.tuples(st.just("clear"), st.just(0)),
        st.tuples(st.just("drain"), st.just(0)),
    ),
    max_size=60,
)


def _pool() -> list[ElectronicsProduct]:
    return [
        ElectronicsProduct(
            product_id=uuid4(),
            name=f"item-{i}",
            category=Category.of(f"cat{i % 3}"),
            price=Decimal("10"),
            warranty_months=12,
            weight=Decimal("1"),
        )
        for i in range(POOL_SIZE)
    ]


@given(ops=_ops)
@settings(max_examples=200, suppress_health_check=[HealthCheck.function_scoped_fixture])
def test_registry_matches_model(ops):
    Warehouse.reset_instances()
    wh = Warehouse.get_instance("property")
    pool = _pool()

    listed: list = []  # model of insertion order
    changed: list = []  # model of changed-set order

    for op, idx in ops:
        product = pool[idx]
        if op == "add":
            if product in listed:
                continue
            wh.add_product(product)
            listed.append(product)
        elif op == "update":
            if product not in listed:
                continue
            wh.update_product_price(product.product_id, Decimal(idx))
            if product not in changed:
                changed.append(product)
        elif op == "remove":
            wh.remove(product.product_id)
            if product in listed:
                listed.remove(product)
            if product in changed:
                changed.remove(product)
        elif op == "clear":
            wh.clear_products()
            listed.clear()
            changed.clear()
        else:
            assert wh.drain_changed_products() == changed
            changed.clear()

        assert wh.get_products() == listed
        assert wh.get_changed_products() == changed
        assert wh.is_empty() == (not listed)
        grouped = wh.get_products_grouped_by_category()
        assert sorted(p.name for ps in grouped.values() for p in ps) == sorted(
            p.name for p in listed
        )
