# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""叶片边界层的热量导度（m s-1），参见 Monteith & Unsworth (2013) 与 MAESPA 模型。
"""
from math import sqrt

from ...constants import DH0


def gbh_free(Ta, Tl, d, Dh0=DH0):
    """自由对流（浮力驱动）的边界层热量导度。

    :param Ta: 气温（°C）
    :param Tl: 叶温（°C）
    :param d: 叶片的特征尺寸（m）
    :param Dh0: 0°C 时热量的分子扩散系数（m2 s-1）

    叶温等于气温时没有自由对流，返回 0。
    """
    if abs(Tl - Ta) > 0.0:
        Gr = 1.58e8 * d ** 3.0 * abs(Tl - Ta)  # Grashof 数
        return 0.5 * Dh0 * (1.0 + 0.007 * Ta) * Gr ** 0.25 / d
    return 0.0


def gbh_forced(Wind, d):
    """强迫对流（风驱动）的边界层热量导度。

    :param Wind: 风速（m s-1）
    :param d: 叶片的特征尺寸（m）
    """
    return 0.003 * sqrt(Wind / d)
