# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
from ...traitlets import Float
from ...base import AbstractPhotosynthesisModel


class ConstantA(AbstractPhotosynthesisModel):
    """恒定的同化速率 A（μmol m-2 s-1），默认 25。不需要任何输入。
    """
    A = Float()

    outputs_ = ("A",)

    _parameter_order = ["A"]
    _defaults = {"A": 25.0}

    def photosynthesis(self, models, status, meteo, constants, obj=None):
        status.A = self.A


class ConstantAGs(AbstractPhotosynthesisModel):
    """恒定的同化速率 A，并通过气孔导度模型计算 Gs 与 Ci。

    输入：Cs（ppm）；输出：A、Gs 与 Ci。
    """
    A = Float()

    inputs_ = ("Cs",)
    outputs_ = ("A", "Gs", "Ci")
    dependencies_ = ("stomatal_conductance",)

    _parameter_order = ["A"]
    _defaults = {"A": 25.0}

    def photosynthesis(self, models, status, meteo, constants, obj=None):
        status.A = self.A
        models["stomatal_conductance"].stomatal_conductance(models, status, meteo, constants, obj)
        status.Ci = min(status.Cs, status.Cs - status.A / status.Gs)
