# -*- coding: utf-8 -*-
# 版权所有 (c) 2004-2024 Wageningen Environmental Research, Wageningen-UR
# Allard de Wit (allard.dewit@wur.nl), 2024年3月
"""Monteith & Unsworth (2013) 的叶片能量平衡模型

叶温通过不动点迭代求解：每次迭代先用当前叶温计算光合作用与气孔导度，再由净辐射、
边界层导度与气孔导度计算潜热通量，最后由能量平衡得到新的叶温。潜热与感热的计算
采用 Schymanski et al. (2017) 修正后的形式。

参考文献:

* Monteith, J. and Unsworth, M. 2013. Principles of environmental physics: plants, animals,
  and the atmosphere. Academic Press.
* Schymanski, S. J. and Or, D. 2017. Leaf-scale experiments reveal an important omission in
  the Penman-Monteith equation. Hydrology and Earth System Sciences 21 (2): 685-706.
* Duursma, R. A. and Medlyn, B. E. 2012. MAESPA: a model to study interactions between water
  limitation, environmental drivers and vegetation function at tree and stand levels.
  Geoscientific Model Development 5 (4): 919-940.
"""
from ...traitlets import Float, Int, Bool
from ...base import AbstractEnergyBalanceModel
from ...base.status import is_uninitialized
from ...settings import settings
from ... import exceptions as exc
from ... import signals
from ...util import (e_sat, ms_to_mol, mol_to_ms, gsc_to_gsw, gbh_to_gbw,
                     net_longwave_radiation)
from ..dispatch import Convergence
from ..conductances.boundary import gbh_free, gbh_forced


def gamma_star(gamma, ash, asv, Rbv, Rsv, Rbh):
    """表观干湿表常数 γ*（kPa K-1）

    :param gamma: 干湿表常数（kPa K-1）
    :param ash: 交换热量的叶面数
    :param asv: 交换水汽的叶面数（1 为下表皮气孔，2 为两面气孔）
    :param Rbv: 水汽的边界层阻力（s m-1）
    :param Rsv: 水汽的气孔阻力（s m-1）
    :param Rbh: 热量的边界层阻力（s m-1）
    """
    return gamma * ash / asv * (Rbv + Rsv) / Rbh


def latent_heat(Rn, VPD, gamma_s, Rbh, delta, rho, ash, Cp):
    """潜热通量 λE（W m-2），Schymanski et al. (2017) eq. 22"""
    return (delta * Rn + rho * Cp * VPD * (ash / Rbh)) / (delta + gamma_s)


def sensible_heat(Rn, VPD, gamma_s, Rbh, delta, rho, ash, Cp):
    """感热通量 H（W m-2），与 latent_heat() 使用相同的平衡"""
    return (gamma_s * Rn - rho * Cp * VPD * (ash / Rbh)) / (delta + gamma_s)


class Monteith(AbstractEnergyBalanceModel):
    """叶片能量平衡模型。

    :param ash: 交换热量的叶面数，默认 2
    :param asv: 交换水汽的叶面数，默认 1（只有下表皮有气孔）
    :param epsilon: 叶片的发射率，默认 0.955
    :param maxiter: 最大迭代次数，默认 10
    :param delta_T: 叶温的收敛阈值（°C），默认 0.01
    :param warm_start: 为 True 时从 Status 中上一次收敛的 Tl 与 Cs 开始迭代，默认 False

    需要初始化的变量：Rs（吸收的短波辐射，W m-2）、sky_fraction（看到天空的比例，0-2）
    与 d（叶片特征尺寸，m）。对象上必须绑定光合作用模型（以及它需要的气孔导度模型）。

    输出 Tl、Rn、Rll、H、lambdaE、Cs、Ci、A、Gs、Gbh、Dl、Gbc，以及迭代次数 iter
    （包括收敛的那一次）和收敛结果 converged（`Convergence`）。

    示例::

        >>> meteo = Atmosphere(T=20.0, Wind=1.0, P=101.3, Rh=0.65)
        >>> leaf = ModelList(energy_balance=Monteith(), photosynthesis=Fvcb(),
        ...                  stomatal_conductance=Medlyn(0.03, 12.0),
        ...                  status=dict(Rs=13.747, sky_fraction=1.0, PPFD=1500.0, d=0.03))
        >>> energy_balance_inplace(leaf, meteo)
        >>> leaf[0].converged
        <Convergence.CONVERGED: 'converged'>
    """
    ash = Float()
    asv = Float()
    epsilon = Float()
    maxiter = Int()
    delta_T = Float()
    warm_start = Bool()

    inputs_ = ("Rs", "sky_fraction", "d")
    outputs_ = ("Tl", "Rn", "Rll", "H", "lambdaE", "Cs", "Ci", "A", "Gs", "Gbh", "Dl", "Gbc",
                "iter", "converged")
    dependencies_ = ("photosynthesis",)
    meteo_required_ = True

    _parameter_order = ["ash", "asv", "epsilon", "maxiter", "delta_T", "warm_start"]
    _defaults = {"ash": 2.0, "asv": 1.0, "epsilon": 0.955, "maxiter": 10, "delta_T": 0.01,
                 "warm_start": False}

    def _seed(self, status, meteo):
        if self.warm_start and not is_uninitialized(status.Tl):
            status.Cs = self._last_Cs(status, meteo)
            status.Dl = e_sat(status.Tl) - e_sat(meteo.T) * meteo.Rh
        else:
            status.Tl = meteo.T - 0.2
            status.Cs = meteo.Ca
            status.Dl = meteo.VPD
        status.Rn = status.Rs

    @staticmethod
    def _last_Cs(status, meteo):
        """上一次收敛的迭代中光合作用使用的 Cs。

        迭代结束时 Status 中的 Cs 已经用这一次的 A 更新过，这里由 Ci、A 与 Gs 反推
        （Ci = min(Cs, Cs - A/Gs)）。
        """
        A, Gs, Ci = status.A, status.Gs, status.Ci
        if not any(is_uninitialized(v) for v in (A, Gs, Ci)) and Gs > 0.0:
            return Ci + max(A, 0.0) / Gs
        return meteo.Ca if is_uninitialized(status.Cs) else status.Cs

    def energy_balance(self, models, status, meteo, constants, obj=None):
        photosynthesis = models["photosynthesis"]
        self._seed(status, meteo)

        converged = Convergence.MAX_ITER_EXCEEDED
        gamma_s = Rbh = 0.0
        i = 0
        for i in range(1, self.maxiter + 1):
            # A, Gs 与 Ci
            photosynthesis.photosynthesis(models, status, meteo, constants, obj)

            # 水汽的气孔阻力（s m-1）
            Rsv = 1.0 / gsc_to_gsw(mol_to_ms(status.Gs, meteo.T, meteo.P, constants.R,
                                             constants.K0), constants.Gsc_to_Gsw)

            # 用当前叶温重新计算净辐射。sky_fraction 为 0-2，两个叶面同时计算
            status.Rll = net_longwave_radiation(status.Tl, meteo.T, self.epsilon, meteo.epsilon,
                                                status.sky_fraction, constants.K0, constants.sigma)
            status.Rn = status.Rs + status.Rll

            # 单面的热量边界层导度（m s-1）与阻力（s m-1）
            status.Gbh = gbh_free(meteo.T, status.Tl, status.d, constants.Dh0) + \
                         gbh_forced(meteo.Wind, status.d)
            Rbh = 1.0 / status.Gbh
            Rbv = 1.0 / gbh_to_gbw(status.Gbh, constants.Gbh_to_Gbw)

            # CO2 的边界层导度（mol m-2 s-1），据此更新叶面 CO2 浓度
            status.Gbc = ms_to_mol(status.Gbh, meteo.T, meteo.P, constants.R, constants.K0) / \
                         constants.Gbc_to_Gbh
            status.Cs = min(meteo.Ca, meteo.Ca - status.A / (status.Gbc * self.asv))

            gamma_s = gamma_star(meteo.gamma, self.ash, self.asv, Rbv, Rsv, Rbh)
            status.lambdaE = latent_heat(status.Rn, meteo.VPD, gamma_s, Rbh, meteo.delta,
                                         meteo.rho, self.ash, constants.Cp)

            Tl_new = meteo.T + (status.Rn - status.lambdaE) / \
                               (meteo.rho * constants.Cp * (self.ash / Rbh))

            if abs(Tl_new - status.Tl) <= self.delta_T:
                status.Tl = Tl_new
                converged = Convergence.CONVERGED
                break

            status.Tl = Tl_new
            # 叶面与空气之间的饱和差
            status.Dl = e_sat(status.Tl) - e_sat(meteo.T) * meteo.Rh

        status.iter = i
        status.converged = converged
        status.H = sensible_heat(status.Rn, meteo.VPD, gamma_s, Rbh, meteo.delta, meteo.rho,
                                 self.ash, constants.Cp)

        if converged is Convergence.MAX_ITER_EXCEEDED:
            msg = "Energy balance did not converge in %i iterations (Tl = %f)." % \
                  (self.maxiter, status.Tl)
            self.logger.debug(msg)
            self._send_signal(signal=signals.energy_balance_max_iter, sender=obj,
                              status=status, iterations=self.maxiter)
            if settings.NONCONVERGENCE_ERROR:
                raise exc.NumericalNonConvergence(msg)
        return converged
