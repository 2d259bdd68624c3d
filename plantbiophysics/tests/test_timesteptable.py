# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
import unittest

from ..base import Status, TimeStepTable, homogeneous_type_steps
from .. import exceptions as exc


class TestHomogeneousTypeSteps(unittest.TestCase):

    def test_broadcast(self):
        steps = homogeneous_type_steps({"a": 5.0, "b": [1.0, 2.0, 3.0]})
        self.assertEqual(len(steps), 3)
        self.assertEqual([s["a"] for s in steps], [5.0, 5.0, 5.0])
        self.assertEqual([s["b"] for s in steps], [1.0, 2.0, 3.0])

    def test_length_one_sequence(self):
        steps = homogeneous_type_steps({"a": [5.0], "b": (1.0, 2.0)})
        self.assertEqual(steps, [{"a": 5.0, "b": 1.0}, {"a": 5.0, "b": 2.0}])

    def test_scalars(self):
        self.assertEqual(homogeneous_type_steps({"a": 5.0}), [{"a": 5.0}])
        self.assertEqual(homogeneous_type_steps(None), [{}])
        self.assertEqual(homogeneous_type_steps({}), [{}])

    def test_mismatch(self):
        self.assertRaises(exc.ConfigurationError, homogeneous_type_steps,
                          {"a": [1.0, 2.0], "b": [1.0, 2.0, 3.0]})


class TestTimeStepTable(unittest.TestCase):

    def setUp(self):
        self.ts = TimeStepTable([Status(Rs=13.747, d=0.03), Status(Rs=12.0, d=0.03)])

    def test_access(self):
        ts = self.ts
        self.assertEqual(len(ts), 2)
        self.assertEqual(ts.keys(), ["Rs", "d"])
        self.assertEqual(ts[0].Rs, 13.747)
        self.assertEqual(ts["Rs"], [13.747, 12.0])
        self.assertEqual(ts.Rs, [13.747, 12.0])
        self.assertEqual(ts[1, "Rs"], 12.0)
        self.assertEqual(ts[1, 0], 12.0)
        self.assertEqual([row.d for row in ts], [0.03, 0.03])
        self.assertRaises(KeyError, ts.__getitem__, "Tl")
        self.assertRaises(AttributeError, getattr, ts, "Tl")

    def test_assignment(self):
        ts = self.ts
        ts["d"] = 0.05
        self.assertEqual(ts.d, [0.05, 0.05])
        ts.Rs = [1.0, 2.0]
        self.assertEqual(ts["Rs"], [1.0, 2.0])
        ts[0, "Rs"] = 3.0
        self.assertEqual(ts[0].Rs, 3.0)
        self.assertRaises(exc.ConfigurationError, ts.__setitem__, "Rs", [1.0, 2.0, 3.0])

    def test_rows_are_references(self):
        row = self.ts[0]
        row.Rs = 0.0
        self.assertEqual(self.ts["Rs"], [0.0, 12.0])

    def test_copy(self):
        cp = self.ts.copy()
        cp["Rs"] = 0.0
        self.assertEqual(self.ts["Rs"], [13.747, 12.0])
        self.assertNotEqual(cp, self.ts)

    def test_heterogeneous_rows(self):
        self.assertRaises(exc.ConfigurationError, TimeStepTable,
                          [Status(Rs=13.747, d=0.03), Status(Rs=12.0)])
        self.assertRaises(exc.ConfigurationError, TimeStepTable, [])
        self.assertRaises(exc.ConfigurationError, TimeStepTable, [{"Rs": 1.0}])

    def test_dataframe(self):
        df = self.ts.to_dataframe()
        self.assertEqual(list(df.columns), ["Rs", "d"])
        self.assertEqual(len(df), 2)
        ts = TimeStepTable.from_dataframe(df)
        self.assertEqual(ts["Rs"], [13.747, 12.0])


def suite():
    """ 该函数定义了本模块中所有测试 """
    loader = unittest.defaultTestLoader
    suite = unittest.TestSuite()
    for testcase in [TestHomogeneousTypeSteps, TestTimeStepTable]:
        suite.addTests(loader.loadTestsFromTestCase(testcase))
    return suite

if __name__ == '__main__':
   unittest.TextTestRunner(verbosity=2).run(suite())
