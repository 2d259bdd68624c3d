# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""光合作用参数的温度依赖性以及电子传递速率

所有温度均为开尔文温度。默认的温度响应参数取自 Medlyn et al. (2002) 与 plantecophys。
"""
from math import exp, sqrt

from ...constants import R as _R


def arrhenius(A, Ea, Tk, Trk, Hd=None, Delta_s=None, R=_R):
    """Arrhenius 函数：速率常数对温度的依赖。

    :param A: 参考温度下的值
    :param Ea: 活化能（J mol-1）
    :param Tk: 当前温度（K）
    :param Trk: 参考温度（K）
    :param Hd: 最适温度以上的下降速率（J mol-1），可选
    :param Delta_s: 熵因子（J mol-1 K-1），可选
    :param R: 通用气体常数

    给出 Hd 与 Delta_s 时使用带峰值的形式（Medlyn et al. 2002, eq. 17），否则使用单调形式::

        >>> arrhenius(42.75, 37830.0, 298.15, 298.15)
        42.75
    """
    ftk = A * exp(Ea * (Tk - Trk) / (R * Tk * Trk))
    if Hd is None or Delta_s is None:
        return ftk

    ftk2 = 1.0 + exp((Trk * Delta_s - Hd) / (Trk * R))
    ftk3 = 1.0 + exp((Tk * Delta_s - Hd) / (Tk * R))
    return ftk * ftk2 / ftk3


def gamma_star(Tk, Trk, R=_R):
    """CO2 补偿点 Γ*（ppm）"""
    return arrhenius(42.75, 37830.0, Tk, Trk, R=R)


def get_km(Tk, Trk, O2, R=_R):
    """CO2 的有效 Michaelis-Menten 常数 Km（ppm）"""
    Kc = arrhenius(404.9, 79430.0, Tk, Trk, R=R)
    Ko = arrhenius(278.4, 36380.0, Tk, Trk, R=R)
    return Kc * (1.0 + O2 / Ko)


def get_J(PPFD, JMax, alpha, theta):
    """电子传递速率 J（μmol m-2 s-1），即下面二次方程的较小根（Medlyn et al. 2002, eq. 4）:

        θ·J² - (α·PPFD + JMax)·J + α·PPFD·JMax = 0

    取较小根使 J 在强光下趋于 JMax。
    """
    aI = alpha * PPFD
    return (aI + JMax - sqrt((aI + JMax) ** 2.0 - 4.0 * alpha * theta * PPFD * JMax)) / \
           (2.0 * theta)
