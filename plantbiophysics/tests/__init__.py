# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
""" plantbiophysics 的测试集合。
"""
import unittest
import warnings

from . import test_util
from . import test_weather
from . import test_variables
from . import test_status
from . import test_timesteptable
from . import test_modellist
from . import test_light
from . import test_stomatal
from . import test_photosynthesis
from . import test_energy_balance
from . import test_dispatch

def make_test_suite():
    """组装测试套件并返回
    """
    allsuites = unittest.TestSuite([test_util.suite(),
                                    test_weather.suite(),
                                    test_variables.suite(),
                                    test_status.suite(),
                                    test_timesteptable.suite(),
                                    test_modellist.suite(),
                                    test_light.suite(),
                                    test_stomatal.suite(),
                                    test_photosynthesis.suite(),
                                    test_energy_balance.suite(),
                                    test_dispatch.suite(),
                                    ])
    return allsuites

def test_all():
    """组装测试套件并通过TextTestRunner运行测试
    """
    allsuites = make_test_suite()
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        unittest.TextTestRunner(verbosity=2).run(allsuites)
