# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""气孔导度模型与边界层导度"""
from .stomatal import Medlyn, BallBerry, Tuzet, ConstantGs
from .boundary import gbh_free, gbh_forced
