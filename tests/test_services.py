"""
Validation services over in-memory stores.
"""

from decimal import Decimal

import pytest

from commerce_api.application.reference_codes import REFERENCE_CODE_PATTERN
from commerce_api.application.services import (
    CategoryService,
    DeliveryService,
    InventoryService,
    OrderService,
    PaymentService,
    ProductService,
    RequestLogService,
    SupplierService,
)
from commerce_api.core.errors import InvalidArgumentError, InvalidOperationError
from commerce_api.domain.models import (
    Category,
    Delivery,
    Inventory,
    Order,
    OrderItem,
    Payment,
    Product,
    Supplier,
)


def _product(**overrides):
    fields = dict(name="Phone", price=199.0, quantity=3, category_id=1, supplier_id=1)
    fields.update(overrides)
    return Product(**fields)


def _inventory(**overrides):
    fields = dict(
        product_id=1,
        quantity_on_hand=5,
        quantity_reserved=1,
        reorder_level=2,
        reorder_quantity=10,
        warehouse_location="A1",
    )
    fields.update(overrides)
    return Inventory(**fields)


# (service factory, store attribute, valid replacement record)
SERVICES = [
    pytest.param(lambda s: CategoryService(s.categories), "categories",
                 lambda: Category(name="Books"), id="category"),
    pytest.param(lambda s: SupplierService(s.suppliers), "suppliers",
                 lambda: Supplier(name="Acme"), id="supplier"),
    pytest.param(lambda s: ProductService(s.products, s.categories, s.suppliers), "products",
                 _product, id="product"),
    pytest.param(lambda s: OrderService(s.orders, s.products), "orders",
                 lambda: Order(status="Shipped", shipping_address="2 Side St"), id="order"),
    pytest.param(lambda s: DeliveryService(s.deliveries, s.orders), "deliveries",
                 lambda: Delivery(carrier_name="DHL", delivery_address="1 Main St"), id="delivery"),
    pytest.param(lambda s: InventoryService(s.inventory, s.products), "inventory",
                 _inventory, id="inventory"),
    pytest.param(lambda s: PaymentService(s.payments, s.orders), "payments",
                 lambda: Payment(amount=10, payment_method="Card", transaction_id="tx-1"), id="payment"),
]


class TestIdentityChecks:
    """Non-positive ids fail before the store is touched."""

    @pytest.mark.parametrize("bad_id", [0, -1])
    @pytest.mark.parametrize("make_service, store_name, make_entity", SERVICES)
    def test_get_update_delete_reject_non_positive_ids(self, stores, make_service, store_name, make_entity, bad_id):
        service = make_service(stores)
        with pytest.raises(InvalidArgumentError, match="Id must be greater than 0"):
            service.get_by_id(bad_id)
        with pytest.raises(InvalidArgumentError, match="Id must be greater than 0"):
            service.update(bad_id, make_entity())
        with pytest.raises(InvalidArgumentError, match="Id must be greater than 0"):
            service.delete(bad_id)
        assert len(getattr(stores, store_name)) == 0

    @pytest.mark.parametrize("make_service, store_name, make_entity", SERVICES)
    def test_update_missing_record_is_invalid_operation(self, stores, make_service, store_name, make_entity):
        service = make_service(stores)
        with pytest.raises(InvalidOperationError) as exc_info:
            service.update(5, make_entity())
        assert exc_info.value.message == f"{service.entity_name} with ID 5 not found"
        assert len(getattr(stores, store_name)) == 0

    @pytest.mark.parametrize("make_service, store_name, make_entity", SERVICES)
    def test_delete_missing_record_returns_false(self, stores, make_service, store_name, make_entity):
        assert make_service(stores).delete(3) is False

    @pytest.mark.parametrize("bad_id", [0, -1])
    def test_update_quantity_rejects_non_positive_ids(self, stores, bad_id):
        service = InventoryService(stores.inventory, stores.products)
        with pytest.raises(InvalidArgumentError, match="Id must be greater than 0"):
            service.update_quantity(bad_id, 1)


class TestCategoryService:

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_blank_name_is_rejected_without_writing(self, stores, name):
        with pytest.raises(InvalidArgumentError) as exc_info:
            CategoryService(stores.categories).create(Category(name=name))
        assert exc_info.value.message == "Category name is required"
        assert exc_info.value.details == "Field: name"
        assert len(stores.categories) == 0

    def test_name_length_limit(self, stores):
        with pytest.raises(InvalidArgumentError, match="cannot exceed 100 characters"):
            CategoryService(stores.categories).create(Category(name="x" * 101))

    def test_update_keeps_created_at_and_stamps_updated_at(self, stores):
        service = CategoryService(stores.categories)
        created = service.create(Category(name="Books"))
        created_at = created.created_at

        assert service.update(created.id, Category(name="Comics")) is True

        stored = service.get_by_id(created.id)
        assert stored.name == "Comics"
        assert stored.created_at == created_at
        assert stored.updated_at is not None

    def test_failed_update_leaves_stored_record_untouched(self, stores):
        service = CategoryService(stores.categories)
        created = service.create(Category(name="Books"))

        with pytest.raises(InvalidArgumentError):
            service.update(created.id, Category(name=""))

        assert service.get_by_id(created.id).name == "Books"


class TestSupplierService:

    def test_optional_fields_have_length_limits(self, stores):
        service = SupplierService(stores.suppliers)
        with pytest.raises(InvalidArgumentError, match="Phone cannot exceed 20 characters"):
            service.create(Supplier(name="Acme", phone="1" * 21))
        assert service.create(Supplier(name="Acme", phone="555-0100")).id == 1


class TestProductService:

    def test_missing_category_is_invalid_operation(self, stores):
        SupplierService(stores.suppliers).create(Supplier(name="Acme"))
        service = ProductService(stores.products, stores.categories, stores.suppliers)

        with pytest.raises(InvalidOperationError) as exc_info:
            service.create(_product(category_id=42))

        assert exc_info.value.message == "Category with ID 42 not found"
        assert len(stores.products) == 0

    def test_missing_supplier_is_invalid_operation(self, stores):
        CategoryService(stores.categories).create(Category(name="Phones"))
        service = ProductService(stores.products, stores.categories, stores.suppliers)
        with pytest.raises(InvalidOperationError, match="Supplier with ID 1 not found"):
            service.create(_product())

    @pytest.mark.parametrize("overrides, message", [
        ({"name": ""}, "Product name is required"),
        ({"price": -1}, "Price cannot be negative"),
        ({"quantity": -5}, "Quantity cannot be negative"),
        ({"category_id": 0}, "Valid category is required"),
        ({"supplier_id": -2}, "Valid supplier is required"),
        ({"price": float("nan")}, "Price must be a finite number"),
        ({"price": float("inf")}, "Price must be a finite number"),
        ({"price": 1e30}, "Price cannot exceed 9999999999999999.99"),
        ({"quantity": 2 ** 31}, "Quantity cannot exceed 2147483647"),
    ])
    def test_field_rules(self, stores, overrides, message):
        service = ProductService(stores.products, stores.categories, stores.suppliers)
        with pytest.raises(InvalidArgumentError) as exc_info:
            service.create(_product(**overrides))
        assert exc_info.value.message == message
        assert len(stores.products) == 0

    def test_update_rechecks_references(self, stores, seeded):
        service = ProductService(stores.products, stores.categories, stores.suppliers)
        with pytest.raises(InvalidOperationError):
            service.update(seeded["product"].id, _product(category_id=77))
        assert service.get_by_id(seeded["product"].id).category_id == seeded["category"].id


class TestOrderService:

    def test_create_computes_totals_and_server_fields(self, stores, seeded):
        order = seeded["order"]
        assert order.id == 1
        assert order.status == "Pending"
        assert order.total_amount == Decimal("1999.98")
        assert order.items[0].line_total == Decimal("1999.98")
        assert REFERENCE_CODE_PATTERN.match(order.order_number)
        assert order.order_number.startswith("ORD-")

    def test_order_without_items_is_rejected(self, stores, seeded):
        service = OrderService(stores.orders, stores.products)
        with pytest.raises(InvalidArgumentError, match="Total amount must be greater than 0"):
            service.create(Order(customer_email="a@b.c", customer_name="A", shipping_address="Street"))

    def test_unknown_product_in_items(self, stores, seeded):
        service = OrderService(stores.orders, stores.products)
        order = Order(customer_email="a@b.c", customer_name="A", shipping_address="Street")
        order.items = [OrderItem(product_id=9, quantity=1, unit_price=1)]
        with pytest.raises(InvalidOperationError, match="Product with ID 9 not found"):
            service.create(order)
        assert len(stores.orders) == 1

    def test_status_update_stamps_dates_and_keeps_customer(self, stores, seeded):
        service = OrderService(stores.orders, stores.products)
        service.update(1, Order(status="Shipped", shipping_address="2 Side St"))

        stored = service.get_by_id(1)
        assert stored.status == "Shipped"
        assert stored.shipping_address == "2 Side St"
        assert stored.shipped_date is not None
        assert stored.customer_name == "Ada"
        assert stored.total_amount == Decimal("1999.98")
        assert len(stored.items) == 1

    def test_unknown_status_is_rejected(self, stores, seeded):
        service = OrderService(stores.orders, stores.products)
        with pytest.raises(InvalidArgumentError, match="Order status must be one of"):
            service.update(1, Order(status="Lost", shipping_address="x"))

    @pytest.mark.parametrize("field, message", [
        ("customer_email", "Customer email is required"),
        ("customer_name", "Customer name is required"),
        ("shipping_address", "Shipping address is required"),
    ])
    @pytest.mark.parametrize("blank", ["", "   ", None])
    def test_blank_customer_fields_are_rejected(self, stores, seeded, field, message, blank):
        service = OrderService(stores.orders, stores.products)
        order = Order(customer_email="a@b.c", customer_name="A", shipping_address="Street")
        order.items = [OrderItem(product_id=1, quantity=1, unit_price=5)]
        setattr(order, field, blank)

        with pytest.raises(InvalidArgumentError) as exc_info:
            service.create(order)

        assert exc_info.value.message == message
        assert len(stores.orders) == 1

    @pytest.mark.parametrize("item, message", [
        ({"quantity": 1, "unit_price": 1e30}, "Order item unit price cannot exceed 9999999999999999.99"),
        ({"quantity": 1, "unit_price": float("inf")}, "Order item unit price must be a finite number"),
        ({"quantity": 1, "unit_price": float("nan")}, "Order item unit price must be a finite number"),
        ({"quantity": 2 ** 31, "unit_price": 1}, "Order item quantity cannot exceed 2147483647"),
    ])
    def test_out_of_range_items_are_rejected_before_totals(self, stores, seeded, item, message):
        service = OrderService(stores.orders, stores.products)
        order = Order(customer_email="a@b.c", customer_name="A", shipping_address="Street")
        order.items = [OrderItem(product_id=1, **item)]

        with pytest.raises(InvalidArgumentError) as exc_info:
            service.create(order)

        assert exc_info.value.message == message
        assert order.total_amount is None
        assert len(stores.orders) == 1


class TestDeliveryService:

    def test_create_requires_existing_order(self, stores):
        service = DeliveryService(stores.deliveries, stores.orders)
        with pytest.raises(InvalidOperationError, match="Order with ID 3 not found"):
            service.create(Delivery(order_id=3, carrier_name="DHL", delivery_address="x"))
        assert len(stores.deliveries) == 0

    def test_create_assigns_tracking_number(self, stores, seeded):
        delivery = DeliveryService(stores.deliveries, stores.orders).create(
            Delivery(order_id=1, carrier_name="DHL", delivery_address="1 Main St")
        )
        assert delivery.status == "Pending"
        assert delivery.tracking_number.startswith("TRK-")
        assert REFERENCE_CODE_PATTERN.match(delivery.tracking_number)

    def test_update_carries_order_and_stamps_dates(self, stores, seeded):
        service = DeliveryService(stores.deliveries, stores.orders)
        created = service.create(Delivery(order_id=1, carrier_name="DHL", delivery_address="1 Main St"))
        tracking = created.tracking_number

        service.update(created.id, Delivery(status="Delivered", signed_by="Ada"))

        stored = service.get_by_id(created.id)
        assert stored.order_id == 1
        assert stored.tracking_number == tracking
        assert stored.signed_by == "Ada"
        assert stored.shipped_date is not None
        assert stored.delivered_date is not None

    @pytest.mark.parametrize("field, message", [
        ("carrier_name", "Carrier name is required"),
        ("delivery_address", "Delivery address is required"),
    ])
    @pytest.mark.parametrize("blank", ["", "   ", None])
    def test_blank_fields_are_rejected(self, stores, seeded, field, message, blank):
        delivery = Delivery(order_id=1, carrier_name="DHL", delivery_address="1 Main St")
        setattr(delivery, field, blank)

        with pytest.raises(InvalidArgumentError) as exc_info:
            DeliveryService(stores.deliveries, stores.orders).create(delivery)

        assert exc_info.value.message == message
        assert len(stores.deliveries) == 0

    def test_get_by_order_id(self, stores, seeded):
        service = DeliveryService(stores.deliveries, stores.orders)
        service.create(Delivery(order_id=1, carrier_name="DHL", delivery_address="1 Main St"))
        assert len(service.get_by_order_id(1)) == 1
        assert service.get_by_order_id(2) == []
        with pytest.raises(InvalidArgumentError, match="Order ID must be greater than 0"):
            service.get_by_order_id(0)


class TestPaymentService:

    def test_create_requires_existing_order(self, stores):
        service = PaymentService(stores.payments, stores.orders)
        with pytest.raises(InvalidOperationError):
            service.create(Payment(order_id=1, amount=10, payment_method="Card", transaction_id="tx-1"))
        assert len(stores.payments) == 0

    def test_amount_must_be_positive(self, stores, seeded):
        service = PaymentService(stores.payments, stores.orders)
        with pytest.raises(InvalidArgumentError, match="Payment amount must be greater than 0"):
            service.create(Payment(order_id=1, amount=0, payment_method="Card", transaction_id="tx-1"))

    @pytest.mark.parametrize("field, message", [
        ("payment_method", "Payment method is required"),
        ("transaction_id", "Transaction ID is required"),
    ])
    @pytest.mark.parametrize("blank", ["", "   ", None])
    def test_blank_fields_are_rejected(self, stores, seeded, field, message, blank):
        payment = Payment(order_id=1, amount=10, payment_method="Card", transaction_id="tx-1")
        setattr(payment, field, blank)

        with pytest.raises(InvalidArgumentError) as exc_info:
            PaymentService(stores.payments, stores.orders).create(payment)

        assert exc_info.value.message == message
        assert len(stores.payments) == 0

    def test_amount_above_column_precision_is_rejected(self, stores, seeded):
        service = PaymentService(stores.payments, stores.orders)
        with pytest.raises(InvalidArgumentError, match="Payment amount cannot exceed"):
            service.create(Payment(order_id=1, amount=1e30, payment_method="Card", transaction_id="tx-1"))
        assert len(stores.payments) == 0

    def test_refund_stamps_refund_date(self, stores, seeded):
        service = PaymentService(stores.payments, stores.orders)
        payment = service.create(Payment(order_id=1, amount=10, payment_method="Card", transaction_id="tx-1"))
        assert payment.status == "Pending"
        assert payment.payment_date is not None

        service.update(payment.id, Payment(status="Refunded", refund_reason="Damaged"))

        stored = service.get_by_id(payment.id)
        assert stored.refund_date is not None
        assert stored.amount == 10
        assert stored.transaction_id == "tx-1"
        assert [p.id for p in service.get_by_order_id(1)] == [payment.id]


class TestInventoryService:

    def test_create_computes_available(self, stores, seeded):
        inventory = InventoryService(stores.inventory, stores.products).create(_inventory())
        assert inventory.quantity_available == 4

    def test_create_requires_existing_product(self, stores):
        with pytest.raises(InvalidOperationError, match="Product with ID 1 not found"):
            InventoryService(stores.inventory, stores.products).create(_inventory())

    def test_blank_warehouse_is_rejected(self, stores, seeded):
        with pytest.raises(InvalidArgumentError, match="Warehouse location is required"):
            InventoryService(stores.inventory, stores.products).create(_inventory(warehouse_location=" "))

    def test_update_quantity_applies_delta(self, stores, seeded):
        service = InventoryService(stores.inventory, stores.products)
        created = service.create(_inventory())

        assert service.update_quantity(created.id, -3) is True

        stored = service.get_by_id(created.id)
        assert (stored.quantity_on_hand, stored.quantity_reserved, stored.quantity_available) == (2, 1, 1)

    def test_update_quantity_cannot_go_negative(self, stores, seeded):
        service = InventoryService(stores.inventory, stores.products)
        created = service.create(_inventory())

        with pytest.raises(InvalidOperationError, match="Quantity cannot be negative"):
            service.update_quantity(created.id, -10)

        stored = service.get_by_id(created.id)
        assert (stored.quantity_on_hand, stored.quantity_available) == (5, 4)

    def test_update_quantity_above_integer_range_is_rejected(self, stores, seeded):
        service = InventoryService(stores.inventory, stores.products)
        created = service.create(_inventory())

        with pytest.raises(InvalidArgumentError, match="Quantity on hand cannot exceed 2147483647"):
            service.update_quantity(created.id, 2 ** 31)

        assert service.get_by_id(created.id).quantity_on_hand == 5

    def test_update_quantity_missing_record(self, stores):
        with pytest.raises(InvalidOperationError, match="Inventory with ID 4 not found"):
            InventoryService(stores.inventory, stores.products).update_quantity(4, 1)

    def test_update_recomputes_available_and_keeps_product(self, stores, seeded):
        service = InventoryService(stores.inventory, stores.products)
        created = service.create(_inventory())
        service.update(created.id, _inventory(product_id=None, quantity_on_hand=8, quantity_reserved=3))

        stored = service.get_by_id(created.id)
        assert stored.product_id == 1
        assert stored.quantity_available == 5

    def test_get_by_product_id(self, stores, seeded):
        service = InventoryService(stores.inventory, stores.products)
        created = service.create(_inventory())
        assert service.get_by_product_id(1).id == created.id
        assert service.get_by_product_id(2) is None


class TestRequestLogService:

    def test_log_request_clamps_elapsed(self, stores):
        service = RequestLogService(stores.request_logs)
        entry = service.log_request("GET", "/api/categories", 200, -4)
        assert entry.elapsed_milliseconds == 0
        assert entry.requested_at is not None
        assert service.get_by_id(entry.id) is entry
        assert service.get_all() == [entry]
