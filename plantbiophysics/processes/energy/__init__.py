# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""能量平衡模型"""
from .monteith import Monteith, gamma_star, latent_heat, sensible_heat
