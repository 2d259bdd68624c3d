# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""基于 Beer-Lambert 定律的光截获模型

入射 PAR 取自气象数据的 Ri_PAR_f（W m-2），通过 constants.J_to_umol 转换为光量子通量
（μmol m-2 s-1）。
"""
from math import exp

from ...traitlets import Float
from ...base import AbstractLightInterceptionModel


class Beer(AbstractLightInterceptionModel):
    """Beer-Lambert 定律::

        PPFD = Ri_PAR_f·exp(-k·LAI)·J_to_umol

    :param k: 消光系数

    输入：LAI（m2 m-2）；输出：PPFD（μmol m-2 s-1）。
    """
    k = Float()

    inputs_ = ("LAI",)
    outputs_ = ("PPFD",)
    meteo_required_ = True

    _parameter_order = ["k"]

    def light_interception(self, models, status, meteo, constants, obj=None):
        status.PPFD = meteo.Ri_PAR_f * exp(-self.k * status.LAI) * constants.J_to_umol


class BeerShortwave(AbstractLightInterceptionModel):
    """Beer-Lambert 定律，同时由 PAR 推算吸收的短波辐射 Rs::

        aPAR = Ri_PAR_f·exp(-k·LAI)
        PPFD = aPAR·J_to_umol
        Rs = aPAR / f

    :param k: 消光系数
    :param f: PAR 占短波辐射的比例，默认 0.48

    输入：LAI；输出：Rs（W m-2）与 PPFD（μmol m-2 s-1）。
    """
    k = Float()
    f = Float()

    inputs_ = ("LAI",)
    outputs_ = ("Rs", "PPFD")
    meteo_required_ = True

    _parameter_order = ["k", "f"]
    _defaults = {"f": 0.48}

    def light_interception(self, models, status, meteo, constants, obj=None):
        aPAR = meteo.Ri_PAR_f * exp(-self.k * status.LAI)
        status.PPFD = aPAR * constants.J_to_umol
        status.Rs = aPAR / self.f


class Ignore(AbstractLightInterceptionModel):
    """不计算光截获，例如对看不见的几何体跳过计算。"""

    def light_interception(self, models, status, meteo, constants, obj=None):
        pass
