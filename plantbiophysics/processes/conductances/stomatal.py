# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""CO2 气孔导度模型

所有模型都表示为同一种形式::

    Gs = max(gs_min, g0 + closure·A)

其中 closure（气孔关闭函数）由各模型给出，A 为净同化速率（μmol m-2 s-1），
Gs 为 CO2 的气孔导度（mol m-2 s-1）。耦合的光合作用模型（例如 Fvcb）直接使用 closure
求解 A、Gs 与 Ci。
"""
from math import exp, sqrt

from ...traitlets import Float
from ...base import AbstractStomatalConductanceModel
from ...base.status import is_uninitialized


class Medlyn(AbstractStomatalConductanceModel):
    """Medlyn et al. (2011) 的气孔导度模型::

        Gs = g0 + (1 + g1/sqrt(Dl))·A/Cs

    :param g0: 残余导度（mol m-2 s-1）
    :param g1: 斜率参数（kPa^0.5）
    :param gs_min: 最小导度，默认 0.001

    Dl 为叶面的饱和差（kPa），小于 1e-9 时按 1e-9 计算，因此 Dl <= 0 不会出错。

    示例::

        >>> leaf = ModelList(stomatal_conductance=Medlyn(0.03, 12.0),
        ...                  status=dict(A=20.0, Cs=400.0, Dl=0.82))
        >>> stomatal_conductance_inplace(leaf)
    """
    g0 = Float()
    g1 = Float()
    gs_min = Float()

    inputs_ = ("Dl", "Cs", "A")
    outputs_ = ("Gs",)

    _parameter_order = ["g0", "g1", "gs_min"]
    _defaults = {"gs_min": 0.001}

    def gs_closure(self, models, status, meteo):
        return (1.0 + self.g1 / sqrt(max(1e-9, status.Dl))) / status.Cs


class BallBerry(AbstractStomatalConductanceModel):
    """Ball et al. (1987) 的气孔导度模型::

        Gs = g0 + g1·Rh·A/Cs

    Rh 取自气象数据（0-1），因此调用时必须提供 Atmosphere 或 Weather。
    """
    g0 = Float()
    g1 = Float()
    gs_min = Float()

    inputs_ = ("Cs", "A")
    outputs_ = ("Gs",)
    meteo_required_ = True

    _parameter_order = ["g0", "g1", "gs_min"]
    _defaults = {"gs_min": 0.001}

    def gs_closure(self, models, status, meteo):
        return self.g1 * meteo.Rh / status.Cs


class Tuzet(AbstractStomatalConductanceModel):
    """Tuzet et al. (2003) 的气孔导度模型，考虑叶水势的影响::

        fpsi = (1 + exp(sf·psi_v)) / (1 + exp(sf·(psi_v - psi_l)))
        Gs = g0 + g1/(Cs - Gamma)·fpsi·A

    :param g0: 残余导度（mol m-2 s-1）
    :param g1: 斜率参数
    :param psi_v: 气孔导度减半时的叶水势（MPa）
    :param sf: 敏感性参数（MPa-1）
    :param Gamma: CO2 补偿点（ppm）
    :param gs_min: 最小导度，默认 0.001
    """
    g0 = Float()
    g1 = Float()
    psi_v = Float()
    sf = Float()
    Gamma = Float()
    gs_min = Float()

    inputs_ = ("psi_l", "Cs", "A")
    outputs_ = ("Gs",)

    _parameter_order = ["g0", "g1", "psi_v", "sf", "Gamma", "gs_min"]
    _defaults = {"gs_min": 0.001}

    def gs_closure(self, models, status, meteo):
        fpsi = (1.0 + exp(self.sf * self.psi_v)) / \
               (1.0 + exp(self.sf * (self.psi_v - status.psi_l)))
        return self.g1 / (status.Cs - self.Gamma) * fpsi


class ConstantGs(AbstractStomatalConductanceModel):
    """恒定的气孔导度 Gs（mol m-2 s-1）。

    :param g0: 残余导度，默认 0
    :param Gs: 气孔导度
    :param gs_min: 最小导度，默认 0.001

    与迭代或恒定同化速率的光合作用模型（FvcbIter、ConstantAGs）一起使用。
    """
    g0 = Float()
    Gs = Float()
    gs_min = Float()

    outputs_ = ("Gs",)

    _parameter_order = ["g0", "Gs", "gs_min"]
    _defaults = {"g0": 0.0, "gs_min": 0.001}

    def gs_closure(self, models, status, meteo):
        A = status.A if "A" in status else 0.0
        if A == 0.0 or is_uninitialized(A):
            return 0.0
        return (self.Gs - self.g0) / A

    def stomatal_conductance(self, models, status, meteo, constants, obj=None):
        status.Gs = self.Gs
