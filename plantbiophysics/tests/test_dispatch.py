# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
import math
import unittest
import warnings

from ..base import Atmosphere, Weather, ModelList, UNINITIALIZED
from ..processes.dispatch import (run, run_inplace, photosynthesis, photosynthesis_inplace,
                                  stomatal_conductance_inplace, copy_objects, Convergence)
from ..processes.photosynthesis import Fvcb, ConstantA
from ..processes.conductances import Medlyn
from ..processes.energy import Monteith
from ..processes.light import BeerShortwave
from ..settings import settings
from .. import exceptions as exc


def make_leaf(**status):
    values = dict(Tl=25.0, PPFD=1000.0, Cs=400.0, Dl=1.0)
    values.update(status)
    return ModelList(photosynthesis=Fvcb(), stomatal_conductance=Medlyn(0.03, 12.0),
                     status=values)


class TestObjects(unittest.TestCase):

    def setUp(self):
        self.meteo = Atmosphere(T=20.0, Wind=1.0, P=101.3, Rh=0.65)

    def test_list(self):
        leaves = [make_leaf(), make_leaf(PPFD=500.0)]
        photosynthesis_inplace(leaves, self.meteo)
        self.assertGreater(leaves[0][0].A, leaves[1][0].A)

    def test_dict(self):
        leaves = {"sun": make_leaf(), "shade": make_leaf(PPFD=200.0)}
        new = photosynthesis(leaves, self.meteo)
        self.assertIsInstance(new, dict)
        self.assertEqual(sorted(new.keys()), ["shade", "sun"])
        self.assertGreater(new["sun"][0].A, new["shade"][0].A)
        self.assertEqual(leaves["sun"][0].A, UNINITIALIZED)

    def test_copy_objects(self):
        leaves = (make_leaf(), make_leaf())
        new = copy_objects(leaves)
        self.assertIsInstance(new, tuple)
        self.assertIsNot(new[0], leaves[0])
        self.assertIsNot(new[0].status, leaves[0].status)
        self.assertIs(new[0].photosynthesis, leaves[0].photosynthesis)
        self.assertEqual(new[0].status, leaves[0].status)

    def test_invalid_objects(self):
        self.assertRaises(exc.ConfigurationError, photosynthesis_inplace, "leaf", self.meteo)
        self.assertRaises(exc.ConfigurationError, photosynthesis, 1.0, self.meteo)

    def test_invalid_meteo(self):
        leaf = make_leaf()
        self.assertRaises(exc.ConfigurationError, photosynthesis_inplace, leaf,
                          dict(T=20.0, Wind=1.0, Rh=0.65))

    def test_weather(self):
        weather = Weather([self.meteo, self.meteo])
        leaf = make_leaf(PPFD=[1000.0, 500.0])
        photosynthesis_inplace(leaf, weather)
        self.assertGreater(leaf[0].A, leaf[1].A)


class TestInitialization(unittest.TestCase):

    def setUp(self):
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            self.leaf = ModelList(stomatal_conductance=Medlyn(0.03, 12.0),
                                  status=dict(Cs=400.0, Dl=1.0))

    def test_warning(self):
        old = settings.UNINITIALIZED_WARNING
        try:
            settings.UNINITIALIZED_WARNING = True
            with warnings.catch_warnings(record=True) as w:
                warnings.simplefilter("always")
                stomatal_conductance_inplace(self.leaf)
            self.assertTrue(any(issubclass(x.category, exc.InitializationWarning) for x in w))
        finally:
            settings.UNINITIALIZED_WARNING = old

    def test_strict(self):
        old = settings.STRICT_INITIALIZATION
        try:
            settings.STRICT_INITIALIZATION = True
            self.assertRaises(exc.InitializationError, stomatal_conductance_inplace, self.leaf)
        finally:
            settings.STRICT_INITIALIZATION = old

    def test_initialized_after_init_status(self):
        old = settings.STRICT_INITIALIZATION
        try:
            settings.STRICT_INITIALIZATION = True
            self.leaf.init_status(A=20.0)
            stomatal_conductance_inplace(self.leaf)
            self.assertAlmostEqual(self.leaf[0].Gs, 0.68)
        finally:
            settings.STRICT_INITIALIZATION = old


class TestRun(unittest.TestCase):

    def setUp(self):
        self.meteo = Atmosphere(T=20.0, Wind=1.0, P=101.3, Rh=0.65, Ri_PAR_f=300.0)

    def test_coupled_run(self):
        leaf = ModelList(light_interception=BeerShortwave(0.6), energy_balance=Monteith(),
                         photosynthesis=Fvcb(), stomatal_conductance=Medlyn(0.03, 12.0),
                         status=dict(LAI=1.0, sky_fraction=1.0, d=0.03))
        self.assertTrue(leaf.is_initialized())
        run_inplace(leaf, self.meteo)
        st = leaf[0]
        aPAR = 300.0 * math.exp(-0.6)
        self.assertAlmostEqual(st.PPFD, aPAR * 4.57)
        self.assertAlmostEqual(st.Rs, aPAR / 0.48)
        self.assertTrue(math.isfinite(st.Tl))
        self.assertIs(st.converged, Convergence.CONVERGED)
        self.assertAlmostEqual(st.lambdaE + st.H, st.Rn, places=6)

    def test_run_not_mutating(self):
        leaves = [ModelList(photosynthesis=ConstantA(10.0)),
                  ModelList(stomatal_conductance=Medlyn(0.03, 12.0),
                            status=dict(A=20.0, Cs=400.0, Dl=1.0))]
        new = run(leaves)
        self.assertEqual(new[0][0].A, 10.0)
        self.assertAlmostEqual(new[1][0].Gs, 0.68)
        self.assertEqual(leaves[0][0].A, UNINITIALIZED)
        self.assertEqual(leaves[1][0].Gs, UNINITIALIZED)

    def test_photosynthesis_without_energy_balance(self):
        leaf = make_leaf()
        run_inplace(leaf, self.meteo)
        self.assertGreater(leaf[0].A, 0.0)
        self.assertNotEqual(leaf[0].Gs, UNINITIALIZED)

    def test_stomatal_conductance_only(self):
        leaf = ModelList(stomatal_conductance=Medlyn(0.03, 12.0),
                         status=dict(A=20.0, Cs=400.0, Dl=1.0))
        stomatal_conductance_inplace(leaf)
        expected = leaf[0].Gs
        leaf[0].Gs = UNINITIALIZED
        run_inplace(leaf)
        self.assertEqual(leaf[0].Gs, expected)


def suite():
    """ 该函数定义了本模块中所有测试 """
    loader = unittest.defaultTestLoader
    suite = unittest.TestSuite()
    for testcase in [TestObjects, TestInitialization, TestRun]:
        suite.addTests(loader.loadTestsFromTestCase(testcase))
    return suite

if __name__ == '__main__':
   unittest.TextTestRunner(verbosity=2).run(suite())
