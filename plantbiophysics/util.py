# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""plantbiophysics 的杂项工具以及大气物理辅助函数
"""
import os
import platform
import tempfile
import logging
from math import exp, sqrt
from collections.abc import Iterable, Mapping

import dotmap

from .constants import (K0, R, RD, DH0, CP, EPSILON, LAMBDA0, SIGMA,
                        GBH_TO_GBW, GSC_TO_GSW)


def e_sat(T):
    """温度 T [°C] 时的饱和水汽压 [kPa]（Monteith & Unsworth, 2013）"""
    return 0.61375 * exp((17.502 * T) / (T + 240.97))


def e_sat_slope(T):
    """饱和水汽压曲线在温度 T [°C] 处的斜率 [kPa K-1]，由 0.1°C 的有限差分得到。"""
    return (e_sat(T + 0.1) - e_sat(T)) / 0.1


def vapor_pressure(T, Rh):
    """由气温 T [°C] 和相对湿度 Rh [0-1] 计算水汽压 [kPa]"""
    return Rh * e_sat(T)


def rh_from_vpd(VPD, es):
    """由饱和差 VPD [kPa] 和饱和水汽压 es [kPa] 计算相对湿度 [0-1]"""
    return 1.0 - VPD / es


def air_density(T, P, Rd=RD, K0=K0):
    """空气密度 [kg m-3]

    :param T: 气温 [°C]
    :param P: 气压 [kPa]
    :param Rd: 干空气气体常数 [J kg-1 K-1]
    :param K0: 绝对零度 [°C]
    """
    return (P * 1e3) / (Rd * (T - K0))


def latent_heat_vaporization(T, lambda0=LAMBDA0):
    """温度 T [°C] 时的汽化潜热 [J kg-1]"""
    return lambda0 - 2.365e3 * T


def psychrometer_constant(P, lambda_v, Cp=CP, epsilon=EPSILON):
    """干湿表常数 [kPa K-1]

    :param P: 气压 [kPa]
    :param lambda_v: 汽化潜热 [J kg-1]
    """
    return (Cp * P) / (epsilon * lambda_v)


def atmosphere_emissivity(T, e, K0=K0):
    """大气发射率 [0-1]（Leuning et al., 1995）

    :param T: 气温 [°C]
    :param e: 水汽压 [kPa]
    """
    return 0.642 * (e * 100 / (T - K0)) ** (1.0 / 7.0)


def black_body(T, K0=K0, sigma=SIGMA):
    """温度 T [°C] 的黑体辐射通量 [W m-2]"""
    return sigma * (T - K0) ** 4.0


def grey_body(T, eps, K0=K0, sigma=SIGMA):
    """温度 T [°C]、发射率 eps 的灰体辐射通量 [W m-2]"""
    return eps * black_body(T, K0, sigma)


def net_longwave_radiation(T1, T2, eps1, eps2, visible_fraction, K0=K0, sigma=SIGMA):
    """物体1（温度 T1, 发射率 eps1）与物体2（温度 T2, 发射率 eps2）之间的净长波辐射 [W m-2]。

    结果为正时物体1获得能量。visible_fraction 为从物体1看到物体2的比例，例如位于冠层顶部的叶片
    看到的天空比例为1，冠层内被遮挡的叶片介于0和1之间。

    采用两个平行灰体表面之间的辐射交换公式。
    """
    Tk1 = T1 - K0
    Tk2 = T2 - K0
    return sigma * visible_fraction * (Tk2 ** 4.0 - Tk1 ** 4.0) / (1.0 / eps1 + 1.0 / eps2 - 1.0)


def ms_to_mol(G, T, P, R=R, K0=K0):
    """把导度从 m s-1 转换为 mol m-2 s-1

    :param G: 导度 [m s-1]
    :param T: 气温 [°C]
    :param P: 气压 [kPa]
    """
    return G * (P * 1e3) / (R * (T - K0))


def mol_to_ms(G, T, P, R=R, K0=K0):
    """把导度从 mol m-2 s-1 转换为 m s-1"""
    return G * (R * (T - K0)) / (P * 1e3)


def gbh_to_gbw(Gbh, Gbh_to_Gbw=GBH_TO_GBW):
    """热量边界层导度转换为水汽边界层导度"""
    return Gbh * Gbh_to_Gbw


def gsc_to_gsw(Gsc, Gsc_to_Gsw=GSC_TO_GSW):
    """CO2 气孔导度转换为水汽气孔导度"""
    return Gsc * Gsc_to_Gsw


def gsw_to_gsc(Gsw, Gsc_to_Gsw=GSC_TO_GSW):
    """水汽气孔导度转换为 CO2 气孔导度"""
    return Gsw / Gsc_to_Gsw


def positive_root(a, b, c):
    """二次方程 a*x^2 + b*x + c = 0 的 (-b + sqrt(D)) / 2a 根。

    判别式为负时返回 0。这在数学上并不正确，但用于计算 Ci 时在生物学上是合理的
    （此时同化速率为 0）。
    """
    if a == 0.0:
        # 退化为线性方程
        return -c / b if b != 0.0 else 0.0
    discr = b ** 2.0 - 4.0 * a * c
    if discr >= 0.0:
        return (-b + sqrt(discr)) / (2.0 * a)
    return 0.0


def limit(vmin, vmax, v):
    """将v限定在最小值和最大值之间"""

    if vmin > vmax:
        raise RuntimeError("Min value (%f) larger than max (%f)" % (vmin, vmax))

    if v < vmin:       # v小于下限，返回下限值
        return vmin
    elif v < vmax:     # v在范围区间内，返回自身
        return v
    else:              # v大于上限，返回最大值
        return vmax


def is_sequence(value):
    """判断 value 是否为按时间步给出的值序列（字符串和字典除外）"""
    if isinstance(value, (str, bytes, Mapping)):
        return False
    return isinstance(value, Iterable)


def get_user_home():
    """
    一个合理的、平台无关的方法用于获取用户主目录。
    如果运行在系统用户下，则返回tempfile.gettempdir()返回的临时目录。
    """
    user_home = None
    if platform.system() == "Windows":
        user = os.getenv("USERNAME")
        if user is not None:
            user_home = os.path.expanduser("~")
    elif platform.system() == "Linux" or platform.system() == "Darwin":
        user = os.getenv("USER")
        if user is not None:
            user_home = os.path.expanduser("~")
    else:
        msg = "Platform not recognized, using system temp directory for plantbiophysics settings."
        logger = logging.getLogger("plantbiophysics")
        logger.warning(msg)

    if user_home is None:
        user_home = tempfile.gettempdir()

    return user_home


class DotMap(dotmap.DotMap):
    """DotMap 子类，默认关闭 _dynamic。
    """
    def __init__(self, *args, **kwargs):
        kwargs.update(_dynamic=False)
        super().__init__(*args, **kwargs)
