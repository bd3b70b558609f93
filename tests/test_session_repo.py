import json
import unittest
from decimal import Decimal
from unittest import mock

import redis

from storefront.data.models import CartLine, Review
from storefront.repos.session_repo import MemorySessionRepo, RedisSessionRepo


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


class MemorySessionRepoTestCase(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.repo = MemorySessionRepo(ttl=60, clock=self.clock)

    def make_session(self):
        session = self.repo.new_session()
        session.cart.append(CartLine(product_id=101, name="Laptop Pro 15", price=Decimal("1299.99"), quantity=2))
        session.reviews[101] = [Review(author="Ann", rating=4, text="Good")]
        return session

    def test_new_sessions_get_distinct_ids(self):
        self.assertNotEqual(self.repo.new_session().id, self.repo.new_session().id)

    def test_save_and_load(self):
        session = self.make_session()
        self.repo.save(session)

        loaded = self.repo.load(session.id)
        self.assertEqual(loaded.id, session.id)
        self.assertEqual(loaded.cart[0].price, Decimal("1299.99"))
        self.assertEqual(loaded.cart[0].quantity, 2)
        self.assertEqual(loaded.reviews[101][0].text, "Good")

    def test_unsaved_changes_are_not_visible(self):
        session = self.make_session()
        self.repo.save(session)
        session.cart.clear()
        self.assertEqual(len(self.repo.load(session.id).cart), 1)

    def test_unknown_session(self):
        self.assertIsNone(self.repo.load("nope"))

    def test_expired_session_is_dropped(self):
        session = self.make_session()
        self.repo.save(session)

        self.clock.now += 59
        self.assertIsNotNone(self.repo.load(session.id))
        self.clock.now += 1
        self.assertIsNone(self.repo.load(session.id))

    def test_save_refreshes_ttl(self):
        session = self.make_session()
        self.repo.save(session)
        self.clock.now += 50
        self.repo.save(session)
        self.clock.now += 50
        self.assertIsNotNone(self.repo.load(session.id))

    def test_expired_sessions_are_purged_on_save(self):
        for _ in range(50):
            self.repo.save(self.repo.new_session())
        self.assertEqual(len(self.repo._docs), 50)

        self.clock.now += 61
        for _ in range(50):
            self.repo.save(self.repo.new_session())
        self.assertEqual(len(self.repo._docs), 50)

    def test_delete(self):
        session = self.make_session()
        self.repo.save(session)
        self.repo.delete(session.id)
        self.assertIsNone(self.repo.load(session.id))
        self.repo.delete(session.id)


class RedisSessionRepoTestCase(unittest.TestCase):
    def setUp(self):
        self.client = mock.MagicMock()
        self.repo = RedisSessionRepo(client=self.client, ttl=90)

    def test_save_writes_document_with_ttl(self):
        session = self.repo.new_session()
        session.cart.append(CartLine(product_id=104, name="Wallet", price=Decimal("74.95"), quantity=1))
        self.repo.save(session)

        kwargs = self.client.set.call_args.kwargs
        self.assertEqual(kwargs["name"], f"session:{session.id}")
        self.assertEqual(kwargs["ex"], 90)
        doc = json.loads(kwargs["value"])
        self.assertEqual(set(doc), {"cart", "reviews"})
        self.assertEqual(doc["cart"][0]["product_id"], 104)

    def test_load(self):
        self.client.get.return_value = json.dumps({
            "cart": [{"product_id": 102, "name": "Smartphone X", "price": "899.50", "quantity": 3}],
            "reviews": {"102": [{"author": "Bo", "rating": 2, "text": "meh"}]},
        })

        session = self.repo.load("abc")
        self.client.get.assert_called_once_with("session:abc")
        self.assertEqual(session.id, "abc")
        self.assertEqual(session.cart[0].price, Decimal("899.50"))
        self.assertEqual(session.reviews[102][0].rating, 2)

    def test_load_missing(self):
        self.client.get.return_value = None
        self.assertIsNone(self.repo.load("abc"))

    def test_delete(self):
        self.repo.delete("abc")
        self.client.delete.assert_called_once_with("session:abc")

    def test_retries_transient_errors(self):
        self.client.get.side_effect = [redis.ConnectionError("down"), None]
        self.assertIsNone(self.repo.load("abc"))
        self.assertEqual(self.client.get.call_count, 2)

    def test_gives_up_after_three_attempts(self):
        self.client.set.side_effect = redis.ConnectionError("down")
        with self.assertRaises(redis.ConnectionError):
            self.repo.save(self.repo.new_session())
        self.assertEqual(self.client.set.call_count, 3)


if __name__ == "__main__":
    unittest.main()
