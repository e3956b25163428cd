"""Tests for orders API endpoints."""

from datetime import date, timedelta
from decimal import Decimal

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from ordertrack import models
from ordertrack.domain.orders.entities.order import OrderStatus


class TestListOrders:
    """Test suite for GET /orders."""

    def test_list_orders(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        test_order: models.Order,
    ) -> None:
        another = models.Order(
            user_id=test_user.id,
            product_name="Another Product",
            delivery_date=date.today() + timedelta(days=14),
            status=OrderStatus.DELIVERED,
            total=Decimal("149.99"),
        )
        db_session.add(another)
        db_session.commit()

        response = client.get("/api/v1/orders")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 2
        assert data[0]["productName"] == "Test Product"
        assert data[0]["status"] == "CREATED"
        assert data[0]["total"] == "99.99"
        assert data[1]["productName"] == "Another Product"
        assert data[1]["status"] == "DELIVERED"
        assert data[1]["total"] == "149.99"

    def test_list_orders_empty(self, client: TestClient) -> None:
        response = client.get("/api/v1/orders")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []


class TestGetOrder:
    """Test suite for GET /orders/:id."""

    def test_get_order(
        self, client: TestClient, test_user: models.User, test_order: models.Order
    ) -> None:
        response = client.get(f"/api/v1/orders/{test_order.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "id": test_order.id,
            "userId": test_user.id,
            "productName": "Test Product",
            "deliveryDate": (date.today() + timedelta(days=7)).isoformat(),
            "status": "CREATED",
            "total": "99.99",
        }

    def test_get_order_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/orders/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Order with id 999 not found"


class TestCreateOrder:
    """Test suite for PUT /orders/create."""

    def test_create_order(
        self, client: TestClient, db_session: Session, test_user: models.User
    ) -> None:
        delivery = date.today() + timedelta(days=10)
        response = client.put(
            "/api/v1/orders/create",
            json={
                "userId": test_user.id,
                "product_name": "New Product",
                "delivery_date": delivery.isoformat(),
                "status": "CREATED",
                "total": "199.99",
            },
        )

        assert response.status_code == status.HTTP_200_OK
        order_id = response.json()
        assert isinstance(order_id, int)

        db_order = db_session.get(models.Order, order_id)
        assert db_order is not None
        assert db_order.user_id == test_user.id
        assert db_order.product_name == "New Product"
        assert db_order.delivery_date == delivery
        assert db_order.total == Decimal("199.99")

    def test_create_order_unknown_user(self, client: TestClient, db_session: Session) -> None:
        response = client.put(
            "/api/v1/orders/create",
            json={
                "userId": 999,
                "product_name": "New Product",
                "delivery_date": (date.today() + timedelta(days=10)).isoformat(),
                "status": "CREATED",
                "total": "199.99",
            },
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert db_session.query(models.Order).count() == 0

    def test_create_order_negative_user_id(self, client: TestClient, db_session: Session) -> None:
        response = client.put(
            "/api/v1/orders/create",
            json={
                "userId": -1,
                "product_name": "New Product",
                "delivery_date": (date.today() + timedelta(days=10)).isoformat(),
                "status": "CREATED",
                "total": "199.99",
            },
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "User with id -1 does not exist"
        assert db_session.query(models.Order).count() == 0

    def test_create_order_keeps_every_digit_of_total(
        self, client: TestClient, db_session: Session, test_user: models.User
    ) -> None:
        response = client.put(
            "/api/v1/orders/create",
            json={
                "userId": test_user.id,
                "product_name": "Expensive Product",
                "delivery_date": (date.today() + timedelta(days=10)).isoformat(),
                "status": "CREATED",
                "total": "12345678901234567.89",
            },
        )

        assert response.status_code == status.HTTP_200_OK
        order_id = response.json()

        db_session.expire_all()
        db_order = db_session.get(models.Order, order_id)
        assert db_order is not None
        assert db_order.total == Decimal("12345678901234567.89")

        data = client.get(f"/api/v1/orders/{order_id}").json()
        assert data["total"] == "12345678901234567.89"

    def test_create_order_total_as_number(
        self, client: TestClient, db_session: Session, test_user: models.User
    ) -> None:
        response = client.put(
            "/api/v1/orders/create",
            json={
                "userId": test_user.id,
                "product_name": "New Product",
                "delivery_date": (date.today() + timedelta(days=10)).isoformat(),
                "status": "CREATED",
                "total": 25,
            },
        )

        assert response.status_code == status.HTTP_200_OK

        data = client.get(f"/api/v1/orders/{response.json()}").json()
        assert Decimal(data["total"]) == Decimal("25")

    def test_create_order_empty_body(self, client: TestClient) -> None:
        response = client.put("/api/v1/orders/create", json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "User id is required"

    def test_create_order_missing_delivery_date(
        self, client: TestClient, test_user: models.User
    ) -> None:
        response = client.put(
            "/api/v1/orders/create",
            json={"userId": test_user.id, "product_name": "X", "status": "CREATED", "total": 1},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_order_malformed_date(self, client: TestClient, test_user: models.User) -> None:
        response = client.put(
            "/api/v1/orders/create",
            json={
                "userId": test_user.id,
                "product_name": "X",
                "delivery_date": "not-a-date",
                "status": "CREATED",
                "total": 1,
            },
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestUpdateOrder:
    """Test suite for PUT /orders/update/:id."""

    def test_update_order(self, client: TestClient, test_order: models.Order) -> None:
        new_date = date.today() + timedelta(days=21)
        response = client.put(
            f"/api/v1/orders/update/{test_order.id}",
            json={"delivery_date": new_date.isoformat(), "total": "299.99"},
        )

        assert response.status_code == status.HTTP_200_OK

        data = client.get(f"/api/v1/orders/{test_order.id}").json()
        assert data["deliveryDate"] == new_date.isoformat()
        assert data["total"] == "299.99"

    def test_update_total_only(self, client: TestClient, test_order: models.Order) -> None:
        response = client.put(f"/api/v1/orders/update/{test_order.id}", json={"total": "299.99"})

        assert response.status_code == status.HTTP_200_OK

        data = client.get(f"/api/v1/orders/{test_order.id}").json()
        assert data["total"] == "299.99"
        assert data["deliveryDate"] == (date.today() + timedelta(days=7)).isoformat()

    def test_update_delivery_date_only(self, client: TestClient, test_order: models.Order) -> None:
        new_date = date.today() + timedelta(days=8)
        response = client.put(
            f"/api/v1/orders/update/{test_order.id}",
            json={"delivery_date": new_date.isoformat()},
        )

        assert response.status_code == status.HTTP_200_OK

        data = client.get(f"/api/v1/orders/{test_order.id}").json()
        assert data["deliveryDate"] == new_date.isoformat()
        assert data["total"] == "99.99"

    def test_update_earlier_delivery_date_rejected(
        self, client: TestClient, test_order: models.Order
    ) -> None:
        response = client.put(
            f"/api/v1/orders/update/{test_order.id}",
            json={"delivery_date": date.today().isoformat(), "total": 1.0},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "cannot be moved earlier" in response.json()["detail"]

        data = client.get(f"/api/v1/orders/{test_order.id}").json()
        assert data["deliveryDate"] == (date.today() + timedelta(days=7)).isoformat()
        assert data["total"] == "99.99"

    def test_update_order_not_found(self, client: TestClient) -> None:
        response = client.put("/api/v1/orders/update/999", json={"total": 1.0})

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteOrder:
    """Test suite for DELETE /orders/:id."""

    def test_delete_order(
        self, client: TestClient, db_session: Session, test_order: models.Order
    ) -> None:
        order_id = test_order.id
        response = client.delete(f"/api/v1/orders/{order_id}")

        assert response.status_code == status.HTTP_200_OK
        assert db_session.get(models.Order, order_id) is None

    def test_delete_order_not_found(self, client: TestClient) -> None:
        response = client.delete("/api/v1/orders/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
