import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from circular_queue import CircularQueue


class TestCircularQueueEmpty(unittest.TestCase):
    def test_new_queue_is_empty(self):
        q = CircularQueue()
        self.assertEqual(q.size(), 0)
        self.assertTrue(q.is_empty())
        self.assertFalse(q)

    def test_dequeue_on_empty_raises(self):
        with self.assertRaises(IndexError):
            CircularQueue().dequeue()

    def test_front_and_back_on_empty_raise(self):
        q = CircularQueue()
        with self.assertRaises(IndexError):
            q.front()
        with self.assertRaises(IndexError):
            q.back()


class TestCircularQueueOrdering(unittest.TestCase):
    def test_fifo_order(self):
        q = CircularQueue()
        for item in ("a", "b", "c"):
            q.enqueue(item)
        self.assertEqual(q.front(), "a")
        self.assertEqual(q.back(), "c")
        self.assertEqual([q.dequeue() for _ in range(3)], ["a", "b", "c"])
        self.assertTrue(q.is_empty())

    def test_wrap_around_before_growth(self):
        q = CircularQueue()
        for i in range(4):
            q.enqueue(i)
        q.dequeue()
        q.dequeue()
        q.enqueue(4)
        q.enqueue(5)
        self.assertEqual(len(q), 4)
        self.assertEqual(q.front(), 2)
        self.assertEqual(q.back(), 5)
        self.assertEqual([q.dequeue() for _ in range(4)], [2, 3, 4, 5])

    def test_growth_while_wrapped_preserves_order(self):
        q = CircularQueue()
        for i in range(4):
            q.enqueue(i)
        q.dequeue()
        for i in range(4, 12):
            q.enqueue(i)
        self.assertEqual([q.dequeue() for _ in range(len(q))], list(range(1, 12)))

    def test_interleaved_cycles(self):
        q = CircularQueue()
        expected = []
        for cycle in range(50):
            for i in range(7):
                q.enqueue(cycle * 7 + i)
            for _ in range(5):
                expected.append(q.dequeue())
        while q:
            expected.append(q.dequeue())
        self.assertEqual(expected, list(range(350)))


class TestCircularQueueMaintenance(unittest.TestCase):
    def test_clear_then_reuse(self):
        q = CircularQueue()
        for i in range(6):
            q.enqueue(i)
        q.clear()
        self.assertTrue(q.is_empty())
        q.enqueue(9)
        self.assertEqual(q.front(), 9)
        self.assertEqual(q.size(), 1)

    def test_copy_is_independent(self):
        q = CircularQueue()
        for i in range(5):
            q.enqueue(i)
        q.dequeue()
        clone = q.copy()
        q.dequeue()
        q.enqueue(99)
        self.assertEqual(clone.size(), 4)
        self.assertEqual([clone.dequeue() for _ in range(4)], [1, 2, 3, 4])
        self.assertEqual(q.front(), 2)

    def test_repr_lists_items_front_to_back(self):
        q = CircularQueue()
        q.enqueue(1)
        q.enqueue(2)
        self.assertEqual(repr(q), "CircularQueue([1, 2])")


if __name__ == "__main__":
    unittest.main()
