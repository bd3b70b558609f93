import unittest

from storefront.repos.session_repo import MemorySessionRepo
from storefront.services.review_service import ReviewService, render_stars, review_for_display


class ReviewServiceTestCase(unittest.TestCase):
    def setUp(self):
        self.repo = MemorySessionRepo()
        self.session = self.repo.new_session()
        self.svc = ReviewService(self.session, self.repo)

    def test_product_id_zero_is_rejected(self):
        self.assertIsNone(self.svc.add_review(0, "Bob", 5, "Great"))
        self.assertEqual(self.session.reviews, {})

    def test_blank_text_is_rejected(self):
        self.assertIsNone(self.svc.add_review(101, "Bob", 5, "   \n"))
        self.assertEqual(self.svc.get_reviews(101), [])

    def test_rating_is_clamped(self):
        self.assertEqual(self.svc.add_review(101, "A", 99, "x").rating, 5)
        self.assertEqual(self.svc.add_review(101, "A", -3, "x").rating, 1)
        self.assertEqual(self.svc.add_review(101, "A", 3, "x").rating, 3)

    def test_blank_author_becomes_anonymous(self):
        review = self.svc.add_review(101, "   ", 4, "  Solid laptop  ")
        self.assertEqual(review.author, "Anonymous")
        self.assertEqual(review.text, "Solid laptop")

    def test_reviews_keep_insertion_order_per_product(self):
        self.svc.add_review(101, "A", 5, "first")
        self.svc.add_review(102, "B", 4, "other product")
        self.svc.add_review(101, "C", 3, "second")

        self.assertEqual([r.text for r in self.svc.get_reviews(101)], ["first", "second"])
        self.assertEqual([r.text for r in self.svc.get_reviews(102)], ["other product"])
        self.assertEqual(self.svc.get_reviews(103), [])

    def test_text_is_stored_raw_and_escaped_for_display(self):
        review = self.svc.add_review(101, "<Bob>", 5, 'I "love" <b>it</b> & more')
        self.assertEqual(review.text, 'I "love" <b>it</b> & more')

        shown = review_for_display(review)
        self.assertEqual(shown["author"], "&lt;Bob&gt;")
        self.assertEqual(shown["text"], "I &quot;love&quot; &lt;b&gt;it&lt;/b&gt; &amp; more")
        self.assertEqual(shown["stars"], "★★★★★")

    def test_review_is_saved(self):
        self.svc.add_review(104, "Ann", 4, "Nice leather")
        stored = self.repo.load(self.session.id)
        self.assertEqual(stored.reviews[104][0].author, "Ann")


class RenderStarsTestCase(unittest.TestCase):
    def test_render_stars(self):
        self.assertEqual(render_stars(3), "★★★☆☆")
        self.assertEqual(render_stars(0), "☆☆☆☆☆")
        self.assertEqual(render_stars(7), "★★★★★")
        self.assertEqual(render_stars(-2), "☆☆☆☆☆")


if __name__ == "__main__":
    unittest.main()
