import unittest

from .geometry import Point, Rect, Size, SizeProposal


class SizeProposalTest(unittest.TestCase):
    def test_replacing_unspecified_dimensions(self):
        self.assertEqual(
            SizeProposal(30, 40).replacing_unspecified_dimensions(),
            Size(30, 40))
        self.assertEqual(
            SizeProposal.UNSPECIFIED.replacing_unspecified_dimensions(),
            Size(10, 10))
        self.assertEqual(
            SizeProposal(None, 40).replacing_unspecified_dimensions(
                Size(1, 2)),
            Size(1, 40))
        self.assertEqual(
            SizeProposal(0, None).replacing_unspecified_dimensions(
                Size(1, 2)),
            Size(0, 2))

    def test_from_size(self):
        self.assertEqual(SizeProposal.from_size(Size(3, 4)),
                         SizeProposal(3, 4))

    def test_constants(self):
        self.assertEqual(SizeProposal.ZERO, SizeProposal(0, 0))
        self.assertEqual(SizeProposal.INFINITY.width, float('inf'))
        self.assertIsNone(SizeProposal.UNSPECIFIED.height)


class RectTest(unittest.TestCase):
    def test_edges(self):
        rect = Rect(Point(10, 20), Size(30, 40))
        self.assertEqual((rect.x0, rect.y0, rect.x1, rect.y1),
                         (10, 20, 40, 60))
        self.assertEqual((rect.width, rect.height), (30, 40))
        self.assertEqual(str(rect), 'Rect(10, 20, 30, 40)')

    def test_contains(self):
        rect = Rect(Point(10, 20), Size(30, 40))
        self.assertTrue(rect.contains(10, 20))
        self.assertFalse(rect.contains(40, 30))
        self.assertFalse(rect.contains(9, 30))


if __name__ == '__main__':
    unittest.main()
