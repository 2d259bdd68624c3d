# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""物理常数

模块级常数供辅助函数使用；`Constants` 命名元组把它们组合在一起，
以便在调用过程时（关键字 `constants=`）传入另一组常数。

========== ================================================ ===============
 名称       含义                                              单位
========== ================================================ ===============
K0          绝对零度                                           °C
R           通用气体常数                                       J mol-1 K-1
Rd          干空气气体常数                                     J kg-1 K-1
Dh0         0°C 时空气中热量的分子扩散系数                     m2 s-1
Cp          空气定压比热                                       J K-1 kg-1
epsilon     水与干空气的分子量之比                             -
lambda0     0°C 时的汽化潜热                                   J kg-1
sigma       Stefan-Boltzmann 常数                              W m-2 K-4
Gbh_to_Gbw  热量边界层导度到水汽边界层导度的转换系数           -
Gsc_to_Gsw  CO2 气孔导度到水汽气孔导度的转换系数               -
Gbc_to_Gbh  CO2 边界层导度到热量边界层导度的转换系数           -
J_to_umol   PAR 能量到光量子的转换系数                         μmol J-1
========== ================================================ ===============
"""
from collections import namedtuple

K0 = -273.15
R = 8.314
RD = 287.0586
DH0 = 21.2e-6
CP = 1013.0
EPSILON = 0.622
LAMBDA0 = 2.501e6
SIGMA = 5.670373e-08
GBH_TO_GBW = 1.075
GSC_TO_GSW = 1.57
GBC_TO_GBH = 1.32
J_TO_UMOL = 4.57

Constants = namedtuple("Constants", "K0, R, Rd, Dh0, Cp, epsilon, lambda0, sigma, "
                                    "Gbh_to_Gbw, Gsc_to_Gsw, Gbc_to_Gbh, J_to_umol",
                       defaults=(K0, R, RD, DH0, CP, EPSILON, LAMBDA0, SIGMA,
                                 GBH_TO_GBW, GSC_TO_GSW, GBC_TO_GBH, J_TO_UMOL))
