"""
Shared pytest fixtures.

The service runs against an in-memory SQLite database that is recreated
for every test.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from app.auth import create_access_token, hash_password
from app.database import Base, SessionLocal, engine
from app.main import app
from app.models.book import Book
from app.models.order import Order
from app.models.user import User


@pytest.fixture(autouse=True)
def reset_db():
    """Fresh tables for each test"""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """Test client with the application lifespan running"""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def hub(client):
    """The notification hub owned by the running application"""
    return client.app.state.hub


@pytest.fixture
def admin_headers():
    token = create_access_token("admin", role="admin")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = create_access_token("reader", role="user")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def add_book():
    """Insert a book and return its ID"""

    def _add(title="1984", new_price=13.0, old_price=18.0, category="Fiction"):
        with SessionLocal() as session:
            book = Book(title=title, new_price=new_price, old_price=old_price, category=category)
            session.add(book)
            session.commit()
            return book.id

    return _add


@pytest.fixture
def add_order():
    """Insert an order directly, e.g. one stored before snapshots existed"""

    def _add(email="a@x.com", product_ids=None, products=None, status="pending"):
        with SessionLocal() as session:
            order = Order(
                name="A",
                email=email,
                address={"city": "X"},
                phone=123,
                product_ids=product_ids or [],
                products=products or [],
                total_price=30,
                status=status
            )
            session.add(order)
            session.commit()
            return order.id

    return _add


@pytest.fixture
def fetch_order():
    """Read an order straight from the database"""

    def _fetch(order_id):
        with SessionLocal() as session:
            order = session.get(Order, order_id)
            return {"status": order.status, "products": order.products, "product_ids": order.product_ids}

    return _fetch


@pytest.fixture
def add_user():
    """Insert a user with a hashed password"""

    def _add(username="admin", password="s3cret", role="admin"):
        with SessionLocal() as session:
            user = User(username=username, password_hash=hash_password(password), role=role)
            session.add(user)
            session.commit()
            return user.id

    return _add
