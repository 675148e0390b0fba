import asyncio

import pytest

from storefront_client.core.domain.cart import Cart, CartLine
from storefront_client.core.exceptions import (
    NotFoundError,
    RemoteUnavailableError,
    UnauthenticatedError,
    ValidationFailedError,
)


async def test_quantity_above_stock_is_rejected_without_remote_call(cart, backend):
    backend.get_cart.return_value = [CartLine(7, 2)]
    await cart.get_cart()

    changed = await cart.set_quantity(7, 6)

    assert changed is False
    backend.update_cart_item.assert_not_awaited()


@pytest.mark.parametrize("quantity", [0, -3])
async def test_non_positive_quantity_is_a_local_no_op(cart, backend, quantity):
    assert await cart.set_quantity(7, quantity) is False
    backend.update_cart_item.assert_not_awaited()
    backend.list_products.assert_not_awaited()


async def test_set_quantity_within_stock_updates_and_refetches(cart, backend):
    backend.get_cart.side_effect = [[CartLine(7, 2)], [CartLine(7, 3)]]
    await cart.get_cart()

    changed = await cart.set_quantity(7, 3)

    assert changed is True
    backend.update_cart_item.assert_awaited_once_with(7, 3)
    assert cart.last_fetched_cart() == Cart.of([CartLine(7, 3)])
    assert not cart.is_pending


async def test_quantity_above_cached_stock_skips_catalog_refresh(cart, catalog, backend, products):
    backend.list_products.side_effect = [products, RemoteUnavailableError("down")]
    await catalog.list_products()
    await catalog.invalidate()

    changed = await cart.set_quantity(7, 6)

    assert changed is False
    assert backend.list_products.await_count == 2
    backend.update_cart_item.assert_not_awaited()


async def test_set_quantity_for_deleted_product_raises_not_found(cart, backend):
    with pytest.raises(NotFoundError):
        await cart.set_quantity(404, 1)
    backend.update_cart_item.assert_not_awaited()


async def test_unauthenticated_add_makes_no_remote_call(cart, backend, identity):
    identity.is_authenticated.return_value = False

    with pytest.raises(UnauthenticatedError):
        await cart.add_item(7, 1)

    backend.add_to_cart.assert_not_awaited()


async def test_unauthenticated_cart_read_is_empty_without_remote_call(cart, backend, identity):
    identity.is_authenticated.return_value = False

    assert await cart.get_cart() == Cart()
    backend.get_cart.assert_not_awaited()


async def test_add_out_of_stock_cached_product_is_rejected(cart, catalog, backend):
    await catalog.list_products()

    with pytest.raises(ValidationFailedError):
        await cart.add_item(8, 1)

    backend.add_to_cart.assert_not_awaited()


async def test_add_item_confirms_then_refetches_cart(cart, backend):
    backend.get_cart.side_effect = [[], [CartLine(7, 1)]]
    await cart.get_cart()

    await cart.add_item(7)

    backend.add_to_cart.assert_awaited_once_with(7, 1)
    assert cart.last_fetched_cart().quantity_of(7) == 1


async def test_failed_mutation_leaves_cached_cart_untouched(cart, backend):
    backend.get_cart.return_value = [CartLine(7, 2)]
    backend.add_to_cart.side_effect = RemoteUnavailableError("down")
    before = await cart.get_cart()

    with pytest.raises(RemoteUnavailableError):
        await cart.add_item(7, 1)

    assert cart.last_fetched_cart() is before
    assert backend.get_cart.await_count == 1
    assert not cart.is_pending


async def test_mutation_completes_after_caller_is_cancelled(cart, backend):
    release = asyncio.Event()

    async def slow_remove(product_id):
        await release.wait()

    backend.get_cart.side_effect = [[CartLine(7, 2)], []]
    backend.remove_cart_item.side_effect = slow_remove
    await cart.get_cart()

    caller = asyncio.create_task(cart.remove_item(7))
    while not cart.is_pending:
        await asyncio.sleep(0)
    caller.cancel()
    with pytest.raises(asyncio.CancelledError):
        await caller

    release.set()
    async with asyncio.timeout(1):
        while cart.is_pending:
            await asyncio.sleep(0)

    assert cart.last_fetched_cart() == Cart()


async def test_view_excludes_orphaned_lines_from_totals(cart, backend):
    backend.get_cart.return_value = [CartLine(7, 2), CartLine(99, 1)]

    view = await cart.view()

    assert view.grand_total == 3000
    assert view.grand_total_display == "$30.00"
    assert view.orphaned_product_ids == (99,)
    line = view.lines[0]
    assert (line.can_increment, line.can_decrement) == (True, True)
