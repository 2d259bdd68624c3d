# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""光合作用（碳同化）模型"""
from .fvcb import Fvcb, FvcbIter, FvcbRaw
from .constant import ConstantA, ConstantAGs
