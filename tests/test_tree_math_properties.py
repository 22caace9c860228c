import random
import unittest

from flattree import (
    U64_MAX,
    children,
    count,
    depth,
    full_roots,
    index,
    left_child,
    left_span,
    offset,
    offset_with_depth,
    parent,
    right_child,
    right_span,
    sibling,
    spans,
)


def _random_indices(n: int, seed: int) -> list[int]:
    rng = random.Random(seed)
    # U64_MAX is the only index whose parent and sibling overflow.
    return [rng.randrange(0, U64_MAX) for _ in range(n)]


class TestTreeMathProperties(unittest.TestCase):
    def test_index_depth_offset_round_trip(self):
        for d in range(20):
            for o in range(64):
                i = index(d, o)
                self.assertEqual(depth(i), d)
                self.assertEqual(offset_with_depth(i, d), o)
                self.assertEqual(offset(i), o)

    def test_round_trip_at_large_offsets(self):
        rng = random.Random(9420)
        for _ in range(500):
            d = rng.randrange(0, 63)
            o = rng.randrange(0, 1 << (63 - d))
            i = index(d, o)
            self.assertEqual(depth(i), d)
            self.assertEqual(offset_with_depth(i, d), o)

    def test_leaf_offset_is_half_the_index(self):
        for i in range(0, 4096, 2):
            self.assertEqual(offset(i), i // 2)
        for i in _random_indices(200, 1):
            i &= ~1
            self.assertEqual(offset(i), i // 2)

    def test_sibling_involution(self):
        for i in range(4096):
            self.assertEqual(sibling(sibling(i)), i)
        for i in _random_indices(500, 2):
            self.assertEqual(sibling(sibling(i)), i)

    def test_sibling_shares_parent(self):
        for i in range(4096):
            self.assertEqual(parent(sibling(i)), parent(i))
            self.assertEqual(depth(sibling(i)), depth(i))

    def test_parent_child_consistency(self):
        for i in range(1, 4096, 2):
            lc, rc = left_child(i), right_child(i)
            self.assertIsNotNone(lc)
            self.assertIsNotNone(rc)
            self.assertEqual(children(i), (lc, rc))
            self.assertEqual(parent(lc), i)
            self.assertEqual(parent(rc), i)

    def test_child_of_parent_is_self(self):
        for i in _random_indices(500, 3):
            p = parent(i)
            self.assertEqual(depth(p), depth(i) + 1)
            self.assertIn(i, children(p))

    def test_leaf_properties(self):
        for i in range(0, 4096, 2):
            self.assertEqual(depth(i), 0)
            self.assertEqual(left_span(i), i)
            self.assertEqual(right_span(i), i)
            self.assertEqual(count(i), 1)
            self.assertIsNone(children(i))
            self.assertIsNone(left_child(i))
            self.assertIsNone(right_child(i))

    def test_count_formula(self):
        for i in range(4096):
            self.assertEqual(count(i), (1 << (depth(i) + 1)) - 1)
            self.assertEqual(count(i), (2 << depth(i)) - 1)

    def test_span_width_matches_count(self):
        for i in range(4096):
            lo, hi = spans(i)
            self.assertEqual(lo % 2, 0)
            self.assertEqual(hi % 2, 0)
            self.assertEqual(hi - lo, count(i) - 1)
            self.assertTrue(lo <= i <= hi)

    def test_full_roots_tile_the_prefix(self):
        for i in range(0, 2048, 2):
            roots = full_roots(i)
            self.assertEqual(roots, sorted(roots))
            self.assertEqual(len(roots), bin(i // 2).count("1"))
            cursor = 0
            for r in roots:
                lo, hi = spans(r)
                self.assertEqual(lo, cursor)
                cursor = hi + 2
            self.assertEqual(cursor, i)

    def test_full_roots_are_maximal(self):
        for i in range(2, 2048, 2):
            roots = full_roots(i)
            depths = [depth(r) for r in roots]
            # Strictly decreasing: two equal neighbours would merge into their parent.
            self.assertEqual(depths, sorted(set(depths), reverse=True))


if __name__ == "__main__":
    unittest.main()
