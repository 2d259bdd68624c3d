# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
import unittest

from pydispatch import dispatcher

from ..base import Atmosphere, ModelList
from ..constants import Constants
from ..processes.dispatch import photosynthesis, photosynthesis_inplace, Convergence
from ..processes.photosynthesis import Fvcb, FvcbIter, FvcbRaw, ConstantA, ConstantAGs
from ..processes.photosynthesis.temperature_dependence import (arrhenius, gamma_star, get_km,
                                                               get_J)
from ..processes.conductances import Medlyn, ConstantGs
from ..settings import settings
from .. import signals
from .. import exceptions as exc


class TestTemperatureDependence(unittest.TestCase):

    def test_arrhenius(self):
        self.assertAlmostEqual(arrhenius(42.75, 37830.0, 298.15, 298.15), 42.75)
        self.assertAlmostEqual(arrhenius(250.0, 29680.0, 298.15, 298.15, 200000.0, 631.88),
                               250.0)
        self.assertGreater(arrhenius(42.75, 37830.0, 303.15, 298.15), 42.75)

    def test_peaked_arrhenius(self):
        # 远高于最适温度时速率下降
        v35 = arrhenius(200.0, 58550.0, 308.15, 298.15, 200000.0, 629.26)
        v45 = arrhenius(200.0, 58550.0, 318.15, 298.15, 200000.0, 629.26)
        self.assertLess(v45, v35)

    def test_gamma_star_km(self):
        self.assertAlmostEqual(gamma_star(298.15, 298.15), 42.75)
        self.assertAlmostEqual(get_km(298.15, 298.15, 210.0), 404.9 * (1.0 + 210.0 / 278.4))

    def test_get_J(self):
        self.assertAlmostEqual(get_J(1500.0, 250.0, 0.425, 0.7), 216.571575, places=5)
        self.assertAlmostEqual(get_J(0.0, 250.0, 0.425, 0.7), 0.0)
        self.assertLess(get_J(1e6, 250.0, 0.425, 0.7), 250.0)


class TestFvcb(unittest.TestCase):

    def setUp(self):
        self.meteo = Atmosphere(T=20.0, Wind=1.0, P=101.3, Rh=0.65)
        self.status = dict(Tl=25.0, PPFD=1000.0, Cs=400.0, Dl=self.meteo.VPD)

    def test_parameters(self):
        m = Fvcb()
        self.assertEqual(m.VcMaxRef, 200.0)
        self.assertEqual(m.theta, 0.7)
        self.assertEqual(Fvcb(VcMaxRef=150.0).VcMaxRef, 150.0)
        self.assertRaises(exc.ParameterError, Fvcb, Vcmax=150.0)
        self.assertEqual(Fvcb(VcMaxRef="150").VcMaxRef, 150.0)
        self.assertRaises(exc.ParameterError, Fvcb, VcMaxRef="fast")
        self.assertEqual(FvcbIter(iter_A_max=20.0).iter_A_max, 20)
        self.assertRaises(exc.ParameterError, FvcbIter, iter_A_max=2.5)
        with self.assertRaises(AttributeError):
            m.VcMaxRef = 100.0

    def test_analytical(self):
        leaf = ModelList(photosynthesis=Fvcb(), stomatal_conductance=Medlyn(0.03, 12.0),
                         status=self.status)
        photosynthesis_inplace(leaf, self.meteo)
        st = leaf[0]
        self.assertGreater(st.A, 0.0)
        self.assertLess(st.Ci, st.Cs)
        self.assertGreaterEqual(st.Gs, 0.001)
        self.assertAlmostEqual(st.Ci, st.Cs - st.A / st.Gs)
        closure = (1.0 + 12.0 / self.meteo.VPD ** 0.5) / 400.0
        self.assertAlmostEqual(st.Gs, 0.03 + closure * st.A)

    def test_iterative_matches_analytical(self):
        analytical = ModelList(photosynthesis=Fvcb(), stomatal_conductance=Medlyn(0.03, 12.0),
                               status=self.status)
        iterative = ModelList(photosynthesis=FvcbIter(), stomatal_conductance=Medlyn(0.03, 12.0),
                              status=self.status)
        photosynthesis_inplace([analytical, iterative], self.meteo)
        a, i = analytical[0], iterative[0]
        self.assertAlmostEqual(i.A, a.A, delta=1e-4 * abs(a.A))
        self.assertAlmostEqual(i.Ci, a.Ci, delta=1e-4 * abs(a.Ci))
        self.assertAlmostEqual(i.Gs, a.Gs, delta=1e-4 * abs(a.Gs))

    def test_iterative_matches_analytical_grid(self):
        # 包括弱光与高温下同化速率接近或小于 0 的叶片
        for Tl in (15.0, 25.0, 35.0, 42.0):
            for PPFD in (0.0, 20.0, 200.0, 1500.0):
                for Cs in (100.0, 400.0, 1000.0):
                    status = dict(Tl=Tl, PPFD=PPFD, Cs=Cs, Dl=1.0)
                    with self.subTest(Tl=Tl, PPFD=PPFD, Cs=Cs):
                        analytical = ModelList(photosynthesis=Fvcb(),
                                               stomatal_conductance=Medlyn(0.03, 12.0),
                                               status=status)
                        iterative = ModelList(photosynthesis=FvcbIter(),
                                              stomatal_conductance=Medlyn(0.03, 12.0),
                                              status=status)
                        photosynthesis_inplace([analytical, iterative], self.meteo)
                        a, i = analytical[0], iterative[0]
                        self.assertAlmostEqual(i.A, a.A, delta=1e-4 * abs(a.A) + 1e-6)
                        self.assertAlmostEqual(i.Ci, a.Ci, delta=1e-4 * abs(a.Ci) + 1e-6)
                        self.assertAlmostEqual(i.Gs, a.Gs, delta=1e-4 * abs(a.Gs) + 1e-6)

    def test_darkness(self):
        for Cs in (100.0, 400.0):
            status = dict(Tl=25.0, PPFD=0.0, Cs=Cs, Dl=1.0)
            for model in (Fvcb(), FvcbIter()):
                leaf = ModelList(photosynthesis=model, stomatal_conductance=Medlyn(0.03, 12.0),
                                 status=status)
                photosynthesis_inplace(leaf, self.meteo)
                # 只剩呼吸，Ci 等于 Cs
                self.assertAlmostEqual(leaf[0].A, -0.6)
                self.assertAlmostEqual(leaf[0].Ci, Cs)
                self.assertGreater(leaf[0].Gs, 0.0)

    def test_iterative_convergence(self):
        leaf = ModelList(photosynthesis=FvcbIter(), stomatal_conductance=Medlyn(0.03, 12.0),
                         status=self.status)
        model = leaf.photosynthesis
        result = model.photosynthesis(leaf.models, leaf[0], self.meteo, Constants(), leaf)
        self.assertIs(result, Convergence.CONVERGED)

    def test_iterative_max_iter(self):
        received = []

        def on_max_iter(sender, status, iterations):
            received.append((sender, iterations))

        dispatcher.connect(on_max_iter, signals.photosynthesis_max_iter)
        try:
            leaf = ModelList(photosynthesis=FvcbIter(iter_A_max=1),
                             stomatal_conductance=Medlyn(0.03, 12.0), status=self.status)
            model = leaf.photosynthesis
            result = model.photosynthesis(leaf.models, leaf[0], self.meteo, Constants(), leaf)
            self.assertIs(result, Convergence.MAX_ITER_EXCEEDED)
            self.assertEqual(received, [(leaf, 1)])

            old = settings.NONCONVERGENCE_ERROR
            try:
                settings.NONCONVERGENCE_ERROR = True
                self.assertRaises(exc.NumericalNonConvergence, photosynthesis_inplace,
                                  leaf, self.meteo)
            finally:
                settings.NONCONVERGENCE_ERROR = old
        finally:
            dispatcher.disconnect(on_max_iter, signals.photosynthesis_max_iter)

    def test_raw(self):
        leaf = ModelList(photosynthesis=FvcbRaw(),
                         status=dict(Tl=25.0, PPFD=1000.0, Ci=[42.75, 300.0]))
        photosynthesis_inplace(leaf)
        # Ci 等于 CO2 补偿点时只剩呼吸
        self.assertAlmostEqual(leaf[0].A, -0.6)
        self.assertGreater(leaf[1].A, 0.0)

    def test_raw_matches_coupled(self):
        coupled = ModelList(photosynthesis=Fvcb(), stomatal_conductance=Medlyn(0.03, 12.0),
                            status=self.status)
        photosynthesis_inplace(coupled, self.meteo)
        raw = ModelList(photosynthesis=FvcbRaw(),
                        status=dict(Tl=25.0, PPFD=1000.0, Ci=coupled[0].Ci))
        photosynthesis_inplace(raw)
        self.assertAlmostEqual(raw[0].A, coupled[0].A, delta=1e-4 * abs(coupled[0].A))

    def test_missing_conductance(self):
        leaf = ModelList(photosynthesis=Fvcb(), status=dict(Tl=25.0, PPFD=1000.0, Cs=400.0))
        self.assertRaises(exc.ConfigurationError, photosynthesis_inplace, leaf, self.meteo)

    def test_not_mutating(self):
        leaf = ModelList(photosynthesis=Fvcb(), stomatal_conductance=Medlyn(0.03, 12.0),
                         status=self.status)
        before = leaf.status.copy()
        new = photosynthesis(leaf, self.meteo)
        self.assertEqual(leaf.status, before)
        self.assertGreater(new[0].A, 0.0)


class TestConstantModels(unittest.TestCase):

    def test_constant_A(self):
        leaf = ModelList(photosynthesis=ConstantA(30.0))
        photosynthesis_inplace(leaf)
        self.assertEqual(leaf["A"], [30.0])
        self.assertEqual(ConstantA().A, 25.0)

    def test_constant_A_Gs(self):
        leaf = ModelList(photosynthesis=ConstantAGs(), stomatal_conductance=ConstantGs(Gs=0.5),
                         status=dict(Cs=400.0))
        photosynthesis_inplace(leaf)
        st = leaf[0]
        self.assertEqual(st.A, 25.0)
        self.assertEqual(st.Gs, 0.5)
        self.assertAlmostEqual(st.Ci, 350.0)

    def test_constant_A_with_medlyn(self):
        leaf = ModelList(photosynthesis=ConstantAGs(20.0), stomatal_conductance=Medlyn(0.03, 12.0),
                         status=dict(Cs=400.0, Dl=1.0))
        photosynthesis_inplace(leaf)
        self.assertAlmostEqual(leaf[0].Gs, 0.68)
        self.assertAlmostEqual(leaf[0].Ci, 400.0 - 20.0 / 0.68)


def suite():
    """ 该函数定义了本模块中所有测试 """
    loader = unittest.defaultTestLoader
    suite = unittest.TestSuite()
    for testcase in [TestTemperatureDependence, TestFvcb, TestConstantModels]:
        suite.addTests(loader.loadTestsFromTestCase(testcase))
    return suite

if __name__ == '__main__':
   unittest.TextTestRunner(verbosity=2).run(suite())
