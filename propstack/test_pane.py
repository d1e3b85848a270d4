import unittest
from unittest.mock import Mock, patch

from .geometry import Point, Rect, Size
from .pane import Pane


class PaneTest(unittest.TestCase):
    def test_place(self):
        pane = Pane()
        callback = Mock()
        pane.push_handlers(on_place=callback)

        frame = Rect(Point(10, 20), Size(30, 40))
        pane.frame = frame
        callback.assert_called_once_with(frame)
        self.assertEqual((pane.x0, pane.y0, pane.x1, pane.y1),
                         (10, 20, 40, 60))
        self.assertEqual((pane.width, pane.height), (30, 40))

        callback.reset_mock()
        pane.frame = Rect(Point(10, 20), Size(30, 40))
        callback.assert_not_called()

    def test_contains(self):
        pane = Pane(Rect(Point(0, 0), Size(100, 50)))
        self.assertTrue(pane.contains(0, 0))
        self.assertTrue(pane.contains(99, 49))
        self.assertFalse(pane.contains(100, 10))
        self.assertFalse(pane.contains(10, 50))

    def test_draw_without_background(self):
        pane = Pane(Rect(Point(0, 0), Size(100, 100)))
        callback = Mock()
        pane.push_handlers(on_draw=callback)
        with patch.object(Pane, '_make_background_shape') as make_shape:
            pane.draw()
            make_shape.assert_not_called()
        callback.assert_called_once_with()

    def test_draw_with_background(self):
        pane = Pane(Rect(Point(0, 0), Size(100, 100)),
                    background=(127, 127, 127))
        with patch.object(Pane, '_make_background_shape') as make_shape:
            pane.draw()
            pane.draw()
            make_shape.assert_called_once_with()
            make_shape.return_value.draw.assert_called_with()
            self.assertEqual(make_shape.return_value.draw.call_count, 2)

            pane.frame = Rect(Point(100, 100), Size(100, 100))
            pane.draw()
            self.assertEqual(make_shape.call_count, 2)

            pane.background = (255, 255, 255)
            pane.draw()
            self.assertEqual(make_shape.call_count, 3)


if __name__ == '__main__':
    unittest.main()
