from __future__ import annotations

import unittest

from vectorchart.fields import FieldAccessor
from vectorchart.path import PathCommand, build_path, build_shadow_path, format_coord, path_from_points
from vectorchart.scales import compute_scale


FIELDS = FieldAccessor.from_keys("x", "y")
TWO = [{"x": "a", "y": 10}, {"x": "b", "y": 20}]
THREE = [{"x": "a", "y": "10"}, {"x": "b", "y": "20"}, {"x": "c", "y": "5"}]


def _scale(data):
    return compute_scale(data, FIELDS, width=900, height=300, margin=50)


class PathBuilderTests(unittest.TestCase):
    def test_straight_two_points_is_move_plus_line(self) -> None:
        path = build_path(TWO, FIELDS, _scale(TWO), use_curve=False)
        self.assertEqual([c.op for c in path.commands], ["M", "L"])
        self.assertEqual(path.commands[0].points, ((50.0, 150.0),))
        self.assertEqual(path.commands[1].points, ((850.0, 50.0),))

    def test_curve_two_points_is_move_plus_two_quadratics(self) -> None:
        path = build_path(TWO, FIELDS, _scale(TWO), use_curve=True)
        self.assertEqual(path.count("M"), 1)
        self.assertEqual(path.count("Q"), 2)
        self.assertEqual(len(path.commands), 3)
        first_q, second_q = path.commands[1], path.commands[2]
        self.assertEqual(first_q.points, ((250.0, 150.0), (450.0, 100.0)))
        self.assertEqual(second_q.points, ((650.0, 50.0), (850.0, 50.0)))

    def test_curve_segments_per_pair(self) -> None:
        path = build_path(THREE, FIELDS, _scale(THREE), use_curve=True)
        self.assertEqual(path.count("Q"), 4)
        self.assertEqual(path.commands[-1].points[-1], (850.0, 200.0))

    def test_straight_path_svg_string(self) -> None:
        path = build_path(THREE, FIELDS, _scale(THREE), use_curve=False)
        self.assertEqual(path.to_svg(), "M 50,150 L 450,50 L 850,200")

    def test_shadow_closes_to_baseline(self) -> None:
        shadow = build_shadow_path(THREE, FIELDS, _scale(THREE), use_curve=False)
        self.assertEqual(
            shadow.commands[-3:],
            (
                PathCommand("L", ((850.0, 250.0),)),
                PathCommand("L", ((50.0, 250.0),)),
                PathCommand("Z"),
            ),
        )
        self.assertTrue(shadow.to_svg().endswith("L 850,250 L 50,250 Z"))

    def test_empty_dataset_gives_empty_path(self) -> None:
        path = build_path([], FIELDS, _scale([]))
        self.assertFalse(path)
        self.assertEqual(path.to_svg(), "")
        self.assertFalse(build_shadow_path([], FIELDS, _scale([])))

    def test_single_point_is_move_only(self) -> None:
        path = path_from_points([(20.0, 30.0)], use_curve=True)
        self.assertEqual([c.op for c in path.commands], ["M"])

    def test_format_coord_trims_zeros(self) -> None:
        self.assertEqual(format_coord(150.0), "150")
        self.assertEqual(format_coord(183.33333333), "183.3333")
        self.assertEqual(format_coord(-0.0), "0")


if __name__ == "__main__":
    unittest.main()
