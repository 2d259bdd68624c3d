# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""Farquhar-von Caemmerer-Berry (FvCB) C3 光合作用模型

同化速率取三个过程中最受限制的一个：

* Rubisco 羧化限制（参数 VcMaxRef），多见于胞间 CO2 浓度较低时；
* RuBP 再生（电子传递）限制（参数 JMaxRef），多见于光照受限时；
* 磷酸丙糖利用（TPU）限制（参数 TPURef），只在同化速率很高时出现。TPURef 默认为 9999，
  即不考虑 TPU 限制。

本模块有三种实现：

* `FvcbRaw`：不与气孔导度耦合，需要 Ci 作为输入（Farquhar et al. 1980）；
* `Fvcb`：与气孔导度模型耦合的解析解（Baldocchi 1994），需要 Cs 作为输入；
* `FvcbIter`：与气孔导度模型耦合的迭代解，需要 Cs 作为输入。

参数（默认值取自 plantecophys）:

=========  ================================================  =================
 名称       含义                                              单位
=========  ================================================  =================
Tr          参考温度                                          °C
VcMaxRef    参考温度下的最大 Rubisco 羧化速率                 μmol m-2 s-1
JMaxRef     参考温度下的最大电子传递速率                      μmol m-2 s-1
RdRef       参考温度下的光下线粒体呼吸速率                    μmol m-2 s-1
TPURef      参考温度下的磷酸丙糖利用速率                      μmol m-2 s-1
Ear         Rd 的活化能                                       J mol-1
O2          胞间 O2 浓度                                      ppm
Eaj         JMax 的活化能                                     J mol-1
Hdj         JMax 在最适温度以上的下降速率                     J mol-1
Delta_Sj    JMax 的熵因子                                     J mol-1 K-1
Eav         VcMax 的活化能                                    J mol-1
Hdv         VcMax 在最适温度以上的下降速率                    J mol-1
Delta_Sv    VcMax 的熵因子                                    J mol-1 K-1
alpha       电子传递的量子效率                                mol e mol-1 quanta
theta       光响应非直角双曲线的曲率                          -
=========  ================================================  =================
"""
from ...traitlets import Float, Int
from ...base import AbstractPhotosynthesisModel
from ...settings import settings
from ... import exceptions as exc
from ... import signals
from ...util import positive_root
from ..dispatch import Convergence
from .temperature_dependence import arrhenius, gamma_star, get_km, get_J


def net_assimilation(Ci, Vj, Gamma_star, VcMax, Km, Rd, TPU):
    """给定 Ci 时的净同化速率（μmol m-2 s-1）。

    与 `Fvcb` 的解析解使用相同的限制规则：Rd 大于 Wj 或 Wv 时，该过程的速率记为 0。
    """
    Wj = Vj * (Ci - Gamma_star) / (Ci + 2.0 * Gamma_star)
    if Wj - Rd < 1.0e-6:
        Wj = 0.0
    Wv = VcMax * (Ci - Gamma_star) / (Ci + Km)
    if Wv - Rd < 0.0:
        Wv = 0.0
    return min(Wv, Wj, 3.0 * TPU) - Rd


def get_Ci_j(Vj, Gamma_star, Cs, Rd, g0, st_closure):
    """RuBP 再生限制下与气孔导度耦合的 Ci（ppm），二次方程的正根（Duursma et al. 2012）"""
    a = g0 + st_closure * (Vj - Rd)
    b = (1.0 - Cs * st_closure) * (Vj - Rd) + g0 * (2.0 * Gamma_star - Cs) - \
        st_closure * (Vj * Gamma_star + 2.0 * Gamma_star * Rd)
    c = -(1.0 - Cs * st_closure) * Gamma_star * (Vj + 2.0 * Rd) - \
        g0 * 2.0 * Gamma_star * Cs
    return positive_root(a, b, c)


def get_Ci_v(VcMax, Gamma_star, Cs, Rd, g0, st_closure, Km):
    """Rubisco 羧化限制下与气孔导度耦合的 Ci（ppm），二次方程的正根"""
    a = g0 + st_closure * (VcMax - Rd)
    b = (1.0 - Cs * st_closure) * (VcMax - Rd) + g0 * (Km - Cs) - \
        st_closure * (VcMax * Gamma_star + Km * Rd)
    c = -(1.0 - Cs * st_closure) * (VcMax * Gamma_star + Km * Rd) - g0 * Km * Cs
    return positive_root(a, b, c)


class _FvcbBase(AbstractPhotosynthesisModel):
    """FvCB 模型族共享的参数以及温度校正"""

    Tr = Float()
    VcMaxRef = Float()
    JMaxRef = Float()
    RdRef = Float()
    TPURef = Float()
    Ear = Float()
    O2 = Float()
    Eaj = Float()
    Hdj = Float()
    Delta_Sj = Float()
    Eav = Float()
    Hdv = Float()
    Delta_Sv = Float()
    alpha = Float()
    theta = Float()

    _parameter_order = ["Tr", "VcMaxRef", "JMaxRef", "RdRef", "TPURef", "Ear", "O2", "Eaj",
                        "Hdj", "Delta_Sj", "Eav", "Hdv", "Delta_Sv", "alpha", "theta"]
    _defaults = {"Tr": 25.0, "VcMaxRef": 200.0, "JMaxRef": 250.0, "RdRef": 0.6,
                 "TPURef": 9999.0, "Ear": 46390.0, "O2": 210.0, "Eaj": 29680.0,
                 "Hdj": 200000.0, "Delta_Sj": 631.88, "Eav": 58550.0, "Hdv": 200000.0,
                 "Delta_Sv": 629.26, "alpha": 0.425, "theta": 0.7}

    def temperature_corrected(self, Tl, constants):
        """返回叶温 Tl（°C）下的 (Γ*, Km, JMax, VcMax, Rd)"""
        Tk = Tl - constants.K0
        Trk = self.Tr - constants.K0
        R = constants.R
        Gamma_star = gamma_star(Tk, Trk, R)
        Km = get_km(Tk, Trk, self.O2, R)
        JMax = arrhenius(self.JMaxRef, self.Eaj, Tk, Trk, self.Hdj, self.Delta_Sj, R)
        VcMax = arrhenius(self.VcMaxRef, self.Eav, Tk, Trk, self.Hdv, self.Delta_Sv, R)
        # Rd 也称为“光下呼吸”（Harley et al. 1986）
        Rd = arrhenius(self.RdRef, self.Ear, Tk, Trk, R=R)
        return Gamma_star, Km, JMax, VcMax, Rd


class FvcbRaw(_FvcbBase):
    """不与气孔导度耦合的 FvCB 模型（Farquhar et al. 1980）。

    输入：PPFD（μmol m-2 s-1）、Tl（°C）与 Ci（ppm）；输出：A（μmol m-2 s-1）。
    """
    inputs_ = ("PPFD", "Tl", "Ci")
    outputs_ = ("A",)

    def photosynthesis(self, models, status, meteo, constants, obj=None):
        Gamma_star, Km, JMax, VcMax, Rd = self.temperature_corrected(status.Tl, constants)
        Vj = get_J(status.PPFD, JMax, self.alpha, self.theta) / 4.0
        status.A = net_assimilation(status.Ci, Vj, Gamma_star, VcMax, Km, Rd, self.TPURef)


class Fvcb(_FvcbBase):
    """与气孔导度模型耦合的 FvCB 模型，解析求解（Baldocchi 1994; Duursma et al. 2012）。

    输入：PPFD、Tl 与 Cs（ppm）；输出：A、Gs（mol m-2 s-1）与 Ci（ppm）。
    对象上必须绑定一个气孔导度模型。

    示例::

        >>> meteo = Atmosphere(T=20.0, Wind=1.0, P=101.3, Rh=0.65)
        >>> leaf = ModelList(photosynthesis=Fvcb(), stomatal_conductance=Medlyn(0.03, 12.0),
        ...                  status=dict(Tl=25.0, PPFD=1000.0, Cs=400.0, Dl=meteo.VPD))
        >>> photosynthesis_inplace(leaf, meteo)

    这里用 VPD 近似 Dl，因为叶温未知（Tl = T 时 Dl = VPD）。
    """
    inputs_ = ("PPFD", "Tl", "Cs")
    outputs_ = ("A", "Gs", "Ci")
    dependencies_ = ("stomatal_conductance",)

    def photosynthesis(self, models, status, meteo, constants, obj=None):
        gs_model = models["stomatal_conductance"]
        Gamma_star, Km, JMax, VcMax, Rd = self.temperature_corrected(status.Tl, constants)
        Vj = get_J(status.PPFD, JMax, self.alpha, self.theta) / 4.0
        Cs = status.Cs

        st_closure = gs_model.gs_closure(models, status, meteo)

        # RuBP 再生限制
        Ci_j = get_Ci_j(Vj, Gamma_star, Cs, Rd, gs_model.g0, st_closure)
        # 黑暗中（Vj = 0）二次方程只剩 Ci_j = -2Γ* 这个根
        if Vj > 0.0 and Ci_j + 2.0 * Gamma_star > 0.0:
            Wj = Vj * (Ci_j - Gamma_star) / (Ci_j + 2.0 * Gamma_star)
        else:
            Wj = 0.0
        # Rd 大于 Wj 时没有同化
        if Wj - Rd < 1.0e-6:
            Wj = 0.0

        # Rubisco 羧化限制
        Ci_v = get_Ci_v(VcMax, Gamma_star, Cs, Rd, gs_model.g0, st_closure, Km)
        if Ci_v <= 0.0 or Ci_v > Cs:
            Wv = 0.0
        else:
            Wv = VcMax * (Ci_v - Gamma_star) / (Ci_v + Km)

        status.A = min(Wv, Wj, 3.0 * self.TPURef) - Rd
        gs_model.stomatal_conductance(models, status, meteo, constants, obj)
        status.Ci = min(Cs, Cs - status.A / status.Gs)


class FvcbIter(_FvcbBase):
    """与气孔导度模型耦合的 FvCB 模型，迭代求解。

    从 Ci = 0.75·Cs 出发，交替计算 A、Gs 与 Ci，直到两次迭代之间 Ci 的变化小于 delta_Ci（ppm）
    或迭代次数达到 iter_A_max。结果应与 `Fvcb` 的解析解一致。

    未收敛时记录调试信息并发送 `signals.photosynthesis_max_iter` 信号；
    若设置了 `settings.NONCONVERGENCE_ERROR`，则抛出 NumericalNonConvergence。
    """
    iter_A_max = Int()
    delta_Ci = Float()

    inputs_ = ("PPFD", "Tl", "Cs")
    outputs_ = ("A", "Gs", "Ci")
    dependencies_ = ("stomatal_conductance",)

    _parameter_order = _FvcbBase._parameter_order + ["iter_A_max", "delta_Ci"]
    _defaults = dict(_FvcbBase._defaults, iter_A_max=50, delta_Ci=1e-6)

    def photosynthesis(self, models, status, meteo, constants, obj=None):
        gs_model = models["stomatal_conductance"]
        Gamma_star, Km, JMax, VcMax, Rd = self.temperature_corrected(status.Tl, constants)
        Vj = get_J(status.PPFD, JMax, self.alpha, self.theta) / 4.0
        Cs = status.Cs

        Ci = 0.75 * Cs
        status.A = net_assimilation(Ci, Vj, Gamma_star, VcMax, Km, Rd, self.TPURef)
        converged = Convergence.MAX_ITER_EXCEEDED
        delta = float("inf")
        for _ in range(self.iter_A_max):
            gs_model.stomatal_conductance(models, status, meteo, constants, obj)
            Ci_new = min(Cs, Cs - status.A / status.Gs)
            if Ci_new <= 0.0:
                Ci_new = 1e-9
                A_new = -Rd
            else:
                A_new = net_assimilation(Ci_new, Vj, Gamma_star, VcMax, Km, Rd, self.TPURef)

            delta = abs(Ci_new - Ci)
            Ci = Ci_new
            status.A = A_new
            if delta < self.delta_Ci:
                converged = Convergence.CONVERGED
                break

        gs_model.stomatal_conductance(models, status, meteo, constants, obj)
        status.Ci = Ci

        if converged is Convergence.MAX_ITER_EXCEEDED:
            msg = "FvcbIter did not converge in %i iterations (last change in Ci: %f ppm)." % \
                  (self.iter_A_max, delta)
            self.logger.debug(msg)
            self._send_signal(signal=signals.photosynthesis_max_iter, sender=obj,
                              status=status, iterations=self.iter_A_max)
            if settings.NONCONVERGENCE_ERROR:
                raise exc.NumericalNonConvergence(msg)
        return converged
