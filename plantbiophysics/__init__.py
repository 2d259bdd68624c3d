# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""plantbiophysics: 植物器官（主要是叶片）耦合生物物理过程的模拟

模拟的过程包括光截获、光合作用（碳同化）、气孔导度以及能量平衡（叶温、感热与潜热通量）。
各过程的模型可以独立定义，再通过 ModelList 组合到一个模拟对象上::

    >>> import plantbiophysics as pb
    >>> meteo = pb.Atmosphere(T=22.0, Wind=0.8333, P=101.325, Rh=0.4490995)
    >>> leaf = pb.ModelList(energy_balance=pb.Monteith(),
    ...                     photosynthesis=pb.Fvcb(),
    ...                     stomatal_conductance=pb.Medlyn(0.03, 12.0),
    ...                     status=dict(Rs=13.747, sky_fraction=1.0, PPFD=1500.0, d=0.03))
    >>> pb.energy_balance_inplace(leaf, meteo)
    >>> leaf[0].converged
    <Convergence.CONVERGED: 'converged'>
"""
import logging.config

from .settings import settings
logging.config.dictConfig(settings.LOG_CONFIG)

from . import exceptions
from . import signals
from .constants import Constants
from .base import (Atmosphere, Weather, Status, TimeStepTable, ModelList, UNINITIALIZED,
                   inputs, outputs, variables, to_initialize, init_variables,
                   init_variables_manual, init_status, is_initialized,
                   homogeneous_type_steps)
from .processes.dispatch import (light_interception, light_interception_inplace,
                                 energy_balance, energy_balance_inplace,
                                 photosynthesis, photosynthesis_inplace,
                                 stomatal_conductance, stomatal_conductance_inplace,
                                 run, run_inplace, Convergence)
from .processes.photosynthesis import Fvcb, FvcbIter, FvcbRaw, ConstantA, ConstantAGs
from .processes.conductances import Medlyn, BallBerry, Tuzet, ConstantGs
from .processes.energy import Monteith
from .processes.light import Beer, BeerShortwave, Ignore

__version__ = "0.9.0"


def test():
    """运行 plantbiophysics 的测试集合"""
    from . import tests
    tests.test_all()
