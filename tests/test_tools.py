import io
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

import numpy as np

from earclip import benchmark, generators
from earclip.config import FIXED_POINT
from earclip.earclipper import triangulate
from earclip.fileio import read_coordinates
from earclip.plot import save_triangulation
from earclip.validate import (polygon_area, triangle_areas,
                              verify_triangulation)


class TestGenerators(unittest.TestCase):

    def test_families_are_counter_clockwise(self):
        for family in generators.FAMILIES:
            with self.subTest(family=family):
                pts = np.array(generators.generate(family, 40))
                self.assertGreater(polygon_area(pts), 0)

    def test_vertex_counts(self):
        self.assertEqual(len(generators.generate('convex', 30)), 30)
        self.assertEqual(len(generators.generate('random', 30)), 30)
        self.assertEqual(len(generators.generate('star', 30)), 30)
        self.assertEqual(len(generators.generate('comb', 23)), 23)

    def test_unknown_family(self):
        with self.assertRaises(ValueError):
            generators.generate('spiral', 10)

    def test_square_disk_area(self):
        self.assertAlmostEqual(polygon_area(np.array(generators.square_disk())), 84.0)

    def test_main_writes_datasets(self):
        with tempfile.TemporaryDirectory() as td:
            with redirect_stdout(io.StringIO()):
                code = generators.main(["--output", td, "--sizes", "10", "20",
                                        "--families", "convex", "star"])
            self.assertEqual(code, 0)
            names = sorted(p.name for p in Path(td).iterdir())
            self.assertEqual(names, ["convex_10.csv", "convex_20.csv",
                                     "star_10.csv", "star_20.csv"])
            self.assertEqual(read_coordinates(Path(td) / "star_20.csv").shape, (20, 2))


class TestValidate(unittest.TestCase):

    square = np.array([(0, 0), (4, 0), (4, 4), (0, 4)], dtype=float)

    def test_triangle_areas(self):
        tris = np.array([[(0, 0), (4, 0), (0, 3)], [(0, 0), (0, 3), (4, 0)]], dtype=float)
        np.testing.assert_allclose(triangle_areas(tris), [6.0, -6.0])

    def test_accepts_valid_triangulation(self):
        tris = np.array([[(0, 4), (0, 0), (4, 0)], [(0, 4), (4, 0), (4, 4)]], dtype=float)
        self.assertEqual(verify_triangulation(self.square, tris), (True, "OK"))

    def test_rejects_wrong_count(self):
        tris = np.array([[(0, 4), (0, 0), (4, 0)]], dtype=float)
        ok, msg = verify_triangulation(self.square, tris)
        self.assertFalse(ok)
        self.assertIn("Wrong count", msg)

    def test_rejects_area_mismatch(self):
        tris = np.array([[(0, 4), (0, 0), (4, 0)], [(0, 4), (4, 0), (2, 2.5)]], dtype=float)
        ok, msg = verify_triangulation(self.square, tris)
        self.assertFalse(ok)
        self.assertIn("Area mismatch", msg)

    def test_rejects_degenerate(self):
        tris = np.array([[(0, 4), (0, 0), (4, 0)], [(0, 0), (2, 0), (4, 0)]], dtype=float)
        ok, msg = verify_triangulation(self.square, tris)
        self.assertFalse(ok)
        self.assertIn("Degenerate", msg)


class TestPlot(unittest.TestCase):

    def test_save_triangulation(self):
        clipper = triangulate(generators.square_disk(), FIXED_POINT)
        with tempfile.TemporaryDirectory() as td:
            out = save_triangulation(clipper, Path(td) / "disk.png")
            self.assertTrue(out.exists())
            self.assertGreater(out.stat().st_size, 0)


class TestBenchmark(unittest.TestCase):

    def test_run_and_summarize(self):
        df = benchmark.run_benchmark(families=['convex', 'star'], sizes=[10, 20],
                                     modes=['fixed', 'floating'], repeats=2)
        self.assertEqual(len(df), 2 * 2 * 2 * 2)
        self.assertEqual(set(df['mode']), {'fixed', 'floating'})
        self.assertTrue((df['triangles'] == df['n'] - 2).all())
        self.assertTrue((df['time_ms'] >= 0).all())

        summary = benchmark.summarize(df)
        self.assertEqual(len(summary), 8)
        self.assertEqual(list(summary.columns), ['polygon_type', 'n', 'mode', 'time_mean',
                                                 'time_std', 'reflex_count', 'triangles'])
        convex = summary[summary['polygon_type'] == 'convex']
        self.assertTrue((convex['reflex_count'] == 0).all())

    def test_main_writes_csv(self):
        with tempfile.TemporaryDirectory() as td:
            output = Path(td) / "bench.csv"
            with redirect_stdout(io.StringIO()):
                code = benchmark.main(["--families", "random", "--sizes", "12",
                                       "--repeats", "1", "--output", str(output)])
            self.assertEqual(code, 0)
            self.assertTrue(output.exists())
            self.assertTrue((Path(td) / "bench_summary.csv").exists())


if __name__ == '__main__':
    unittest.main()
