import unittest

from earclip.la2d import (Point, cross_product, inside_triangle, subtract,
                          triangle_area)


class TestPrimitives(unittest.TestCase):

    def test_subtract_points_from_first_to_second(self):
        self.assertEqual(subtract(Point(1, 2), Point(4, 6)), Point(3, 4))

    def test_cross_product(self):
        self.assertEqual(cross_product(Point(1, 0), Point(0, 1)), 1)
        self.assertEqual(cross_product(Point(0, 1), Point(1, 0)), -1)
        self.assertEqual(cross_product(Point(2, 2), Point(4, 4)), 0)

    def test_triangle_area_sign_follows_orientation(self):
        a, b, c = Point(0, 0), Point(4, 0), Point(0, 3)
        self.assertEqual(triangle_area(a, b, c), 12)
        self.assertEqual(triangle_area(a, c, b), -12)

    def test_collinear_triangle_area_is_zero(self):
        self.assertEqual(triangle_area(Point(0, 0), Point(2, 0), Point(4, 0)), 0)

    def test_epsilon_snaps_noise_to_zero(self):
        a, b, c = Point(0.0, 0.0), Point(1.0, 0.0), Point(2.0, 1e-9)
        self.assertNotEqual(triangle_area(a, b, c), 0)
        self.assertEqual(triangle_area(a, b, c, epsilon=1e-8), 0)

    def test_fixed_point_values_stay_exact_ints(self):
        area = triangle_area(Point(0, 0), Point(40000000, 0), Point(0, 30000000))
        self.assertIsInstance(area, int)
        self.assertEqual(area, 1200000000000000)


class TestInsideTriangle(unittest.TestCase):

    a, b, c = Point(0, 0), Point(4, 0), Point(0, 4)

    def test_strictly_inside(self):
        self.assertTrue(inside_triangle(Point(1, 1), self.a, self.b, self.c))

    def test_inside_clockwise_triangle(self):
        self.assertTrue(inside_triangle(Point(1, 1), self.a, self.c, self.b))

    def test_outside(self):
        self.assertFalse(inside_triangle(Point(3, 3), self.a, self.b, self.c))
        self.assertFalse(inside_triangle(Point(-1, 1), self.a, self.b, self.c))

    def test_point_on_edge_is_not_inside(self):
        self.assertFalse(inside_triangle(Point(2, 0), self.a, self.b, self.c))
        self.assertFalse(inside_triangle(Point(2, 2), self.a, self.b, self.c))
        self.assertFalse(inside_triangle(Point(0, 1), self.a, self.b, self.c))

    def test_coincident_corner_is_not_inside(self):
        for corner in (self.a, self.b, self.c):
            self.assertFalse(inside_triangle(corner, self.a, self.b, self.c))

    def test_near_edge_within_epsilon_is_not_inside(self):
        a, b, c = Point(0.0, 0.0), Point(4.0, 0.0), Point(0.0, 4.0)
        v = Point(2.0, 1e-10)
        self.assertTrue(inside_triangle(v, a, b, c))
        self.assertFalse(inside_triangle(v, a, b, c, epsilon=1e-8))


if __name__ == '__main__':
    unittest.main()
