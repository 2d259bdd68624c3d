# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
import unittest
import pickle

from ..base import Status, init_status, is_initialized, uninitialized_variables, UNINITIALIZED
from ..base import inputs, outputs
from ..processes.photosynthesis import Fvcb
from ..processes.conductances import Medlyn
from ..processes.energy import Monteith
from .. import exceptions as exc


class TestStatus(unittest.TestCase):

    def setUp(self):
        self.st = Status(Rs=13.747, sky_fraction=1.0, d=0.03, PPFD=1500.0)

    def test_access(self):
        st = self.st
        self.assertEqual(st.Rs, 13.747)
        self.assertEqual(st["d"], 0.03)
        self.assertEqual(st[1], 1.0)
        self.assertEqual(st.keys(), ["Rs", "sky_fraction", "d", "PPFD"])
        self.assertEqual(len(st), 4)
        self.assertIn("PPFD", st)
        self.assertEqual(list(st), st.keys())

    def test_assignment(self):
        st = self.st
        st.Rs = 10.0
        st["d"] = 0.05
        st[3] = 1000.0
        self.assertEqual(st.values(), [10.0, 1.0, 0.05, 1000.0])
        with self.assertRaises(exc.UnknownVariableError):
            st.Tl = 25.0
        with self.assertRaises(exc.UnknownVariableError):
            st["Tl"] = 25.0
        self.assertRaises(AttributeError, getattr, st, "Tl")
        self.assertRaises(KeyError, st.__getitem__, "Tl")

    def test_aliasing_and_copy(self):
        alias = self.st
        alias.Rs = 5.0
        self.assertEqual(self.st.Rs, 5.0)

        cp = self.st.copy()
        self.assertEqual(cp, self.st)
        cp.Rs = 1.0
        self.assertEqual(self.st.Rs, 5.0)
        self.assertNotEqual(cp, self.st)

    def test_pickle(self):
        st = pickle.loads(pickle.dumps(self.st))
        self.assertEqual(st, self.st)

    def test_is_initialized(self):
        st = Status(Tl=UNINITIALIZED, Cs=400.0)
        self.assertFalse(st.is_initialized("Tl"))
        self.assertTrue(st.is_initialized("Cs"))
        self.assertEqual(uninitialized_variables(st, ["Tl", "Cs"]), ["Tl"])
        self.assertFalse(is_initialized(st, ["Tl", "Cs"]))
        self.assertTrue(is_initialized(st, ["Cs"]))
        self.assertIn("uninitialized", str(st))


class TestInitStatus(unittest.TestCase):

    def setUp(self):
        self.models = [Monteith(), Fvcb(), Medlyn(0.03, 12.0)]

    def test_sentinel_completeness(self):
        overrides = dict(Rs=13.747, sky_fraction=1.0, d=0.03, PPFD=1500.0)
        st = init_status(self.models, overrides)
        for varname in inputs(*self.models) + outputs(*self.models):
            if varname in overrides:
                self.assertEqual(st[varname], overrides[varname])
            else:
                self.assertEqual(st[varname], UNINITIALIZED)

    def test_no_overrides(self):
        st = init_status(self.models)
        self.assertTrue(all(v == UNINITIALIZED for v in st.values()))

    def test_unknown_override(self):
        self.assertRaises(exc.UnknownVariableError, init_status, self.models, {"LAI": 2.0})


def suite():
    """ 该函数定义了本模块中所有测试 """
    loader = unittest.defaultTestLoader
    suite = unittest.TestSuite()
    for testcase in [TestStatus, TestInitStatus]:
        suite.addTests(loader.loadTestsFromTestCase(testcase))
    return suite

if __name__ == '__main__':
   unittest.TextTestRunner(verbosity=2).run(suite())
